import click
from flask import Flask
from flask.cli import with_appcontext
from contentstore.extensions import mongo


@click.command("init-collections")
@with_appcontext
def init_collections_command():
    """Create the required collections and indexes (safe to repeat)."""
    collections = mongo.init_collections()

    for name, handle in collections.items():
        index_names = sorted(handle.index_information())
        click.echo(f"{name} ({handle.name}): {', '.join(index_names)}")


def register_commands(app: Flask) -> None:
    app.cli.add_command(init_collections_command)
