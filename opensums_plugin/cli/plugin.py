"""Plugin lifecycle and configuration CLI commands."""
import json

import click
from flask import current_app
from flask.cli import with_appcontext

from opensums_plugin.extensions import db
from opensums_plugin.plugins.exceptions import ConfigError
from opensums_plugin.plugins.install import Install


def _config_store():
    return current_app.container.config_store()


def _parse_value(raw: str):
    """Parse VALUE as JSON, falling back to the raw string."""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


@click.group("plugin")
def plugin_cli():
    """Plugin lifecycle commands."""
    pass


@plugin_cli.command("activate")
@with_appcontext
def activate_plugin():
    """Run the activation hook."""
    config_store = Install.activate(_config_store())
    click.echo(f"Plugin '{config_store.get('pluginName')}' activated.")


@plugin_cli.command("deactivate")
@with_appcontext
def deactivate_plugin():
    """Run the deactivation hook."""
    config_store = Install.deactivate(_config_store())
    click.echo(f"Plugin '{config_store.get('pluginName')}' deactivated.")


@plugin_cli.command("uninstall")
@click.confirmation_option(prompt="Delete all persisted plugin configuration?")
@with_appcontext
def uninstall_plugin():
    """Run the uninstall hook."""
    config_store = Install.uninstall(_config_store())
    click.echo(f"Plugin '{config_store.get('pluginName')}' uninstalled.")


@plugin_cli.command("show")
@with_appcontext
def show_config():
    """Show every defined entry and its current value."""
    config_store = _config_store()
    for key in config_store.keys():
        entry = config_store.definition(key)
        value = config_store.get(key)
        click.echo(f"{key} = {json.dumps(value)} [{entry.persist.value}]")


@plugin_cli.command("get")
@click.argument("key")
@with_appcontext
def get_value(key):
    """Print the value of KEY."""
    try:
        value = _config_store().get(key, strict=True)
    except ConfigError as e:
        click.echo(f"Error: {e}")
        return
    click.echo(json.dumps(value))


@plugin_cli.command("set")
@click.argument("key")
@click.argument("value")
@click.option("--strict", is_flag=True, help="Refuse keys that are not defined.")
@with_appcontext
def set_value(key, value, strict):
    """Set KEY to VALUE (parsed as JSON when possible) and flush."""
    config_store = _config_store()
    try:
        if strict:
            config_store.set_known(key, _parse_value(value))
        else:
            config_store.declare_and_set(key, _parse_value(value))
    except ConfigError as e:
        click.echo(f"Error: {e}")
        return
    config_store.flush()
    click.echo(f"{key} = {json.dumps(config_store.get(key))}")


@click.command("init-db")
@with_appcontext
def init_db():
    """Create database tables."""
    db.create_all()
    click.echo("Database tables created.")
