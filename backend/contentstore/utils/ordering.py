def order_by_id(ids, items, key="_id"):
    """
    Return ``items`` in the order given by ``ids``, e.g. after an ``$in``
    query. Ids are compared as strings, so an ObjectId matches its hex form.
    Unmatched ids and unlisted items are dropped: the result may be shorter
    than either input.
    """
    by_id = {}
    for item in items:
        _id = item.get(key)
        if _id is not None:
            by_id[str(_id)] = item

    ordered = []
    for _id in ids:
        if str(_id) in by_id:
            ordered.append(by_id[str(_id)])
    return ordered
