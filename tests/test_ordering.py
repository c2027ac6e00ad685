from bson import ObjectId

from contentstore.utils.ordering import order_by_id


def test_reorders_to_match_ids():
    items = [{"id": 1}, {"id": 2}, {"id": 3}]
    assert order_by_id([3, 1, 2], items, key="id") == [{"id": 3}, {"id": 1}, {"id": 2}]


def test_missing_ids_are_skipped():
    assert order_by_id([1, 2], [{"id": 2}], key="id") == [{"id": 2}]


def test_unlisted_items_are_dropped():
    items = [{"_id": "a"}, {"_id": "b"}, {"_id": "c"}]
    assert order_by_id(["c", "a"], items) == [{"_id": "c"}, {"_id": "a"}]


def test_empty_inputs():
    assert order_by_id([], [{"id": 1}], key="id") == []
    assert order_by_id([1, 2, 3], [], key="id") == []


def test_object_ids_match_their_string_form():
    first, second = ObjectId(), ObjectId()
    items = [{"_id": first, "title": "one"}, {"_id": second, "title": "two"}]

    ordered = order_by_id([str(second), first], items)

    assert [item["title"] for item in ordered] == ["two", "one"]


def test_last_duplicate_wins():
    items = [{"id": 1, "v": "old"}, {"id": 1, "v": "new"}]
    assert order_by_id([1], items, key="id") == [{"id": 1, "v": "new"}]


def test_works_after_in_query(db):
    pages = db["aposPages"]
    ids = [pages.insert_one({"slug": slug}).inserted_id for slug in ("x", "y", "z")]
    wanted = [ids[2], ids[0], ids[1]]

    results = list(pages.find({"_id": {"$in": wanted}}))

    assert [p["slug"] for p in order_by_id(wanted, results)] == ["z", "x", "y"]


def test_items_without_identity_are_ignored():
    items = [{"title": "orphan"}, {"_id": "a"}]
    assert order_by_id(["a"], items) == [{"_id": "a"}]
