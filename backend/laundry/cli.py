# Overview: Flask CLI command groups for bootstrap, inspection, and maintenance.

# backend/laundry/cli.py
# Commands Legend (run from the backend directory):
# Prereqs:
# - Activate your virtualenv.
# - Set FLASK_APP to wsgi.py (PowerShell: $env:FLASK_APP="wsgi.py").
# - Use: python -m flask <group> <command> [options]
#
# System bootstrap/repair:
# - python -m flask system init
#   Idempotent bootstrap: creates tables and seeds default users, customers, outlets, products.
# - python -m flask system reset-db --yes
#   DEV/TEST only: drop and recreate all tables (deletes all data).
# - python -m flask system wipe --yes
#   Clear laundry items, transactions and sessions; keep users and catalog data.
#
# Record inspection:
# - python -m flask records keys
#   List stored collection keys with record counts.
# - python -m flask records list laundryItems
#   Dump a collection as JSON.
# - python -m flask records show products 2
#   Show one record by id.
#
# Users:
# - python -m flask users list
#   List users with role and granted features.
#
# Laundry:
# - python -m flask laundry track LD-003-2024
#   Look up an item by code, as customers do.

import json

import click
from flask.cli import with_appcontext

from .constants import Entity
from .extensions import db
from .permissions import features_for_role
from .services import laundry_service
from .services.kv_store import SqlKeyValueStore
from .services.record_store import get_record_store
from .services.seed_service import initialize_data


@click.group('system')
def system_group():
    """System bootstrap and repair commands."""


@system_group.command('init')
@with_appcontext
def init_system():
    """
    Create tables and seed default collections whose keys are absent.

    Default users (plaintext passwords): admin/admin123, kasir/kasir123, owner/owner123.
    """
    click.echo("START Initializing laundry console...")
    db.create_all()
    seeded = initialize_data(get_record_store())
    if seeded:
        click.echo(f"PASS Seeded: {', '.join(seeded)}")
    else:
        click.echo("PASS All default collections already present")


@system_group.command('reset-db')
@click.option('--yes', is_flag=True, help='Skip confirmation')
@with_appcontext
def reset_db(yes):
    """
    DANGER: Drop all tables and recreate schema.

    This will DELETE ALL DATA!
    """
    if not yes:
        click.confirm("WARN This will DELETE ALL DATA. Are you sure?", abort=True)

    click.echo("DELETE  Dropping all tables...")
    db.drop_all()

    click.echo("BUILD  Creating all tables...")
    db.create_all()

    click.echo("PASS Database reset complete. Run 'python -m flask system init' to initialize.")


@system_group.command('wipe')
@click.option('--yes', is_flag=True, help='Skip confirmation')
@with_appcontext
def wipe_data(yes):
    """Clear laundry items, transactions and sessions while keeping users and catalog data."""
    if not yes:
        click.confirm("WARN This will delete all laundry items and transactions. Continue?", abort=True)

    store = get_record_store()
    for entity in (Entity.LAUNDRY_ITEMS, Entity.TRANSACTIONS, Entity.SESSIONS):
        store.clear(entity)
        click.echo(f"DELETE  Cleared {entity}")
    click.echo("PASS Wipe complete.")


@click.group('records')
def records_group():
    """Record store inspection commands."""


@records_group.command('keys')
@with_appcontext
def list_keys():
    """List stored collection keys with record counts, size and version."""
    store = get_record_store()
    keys = store.entities()
    if not keys:
        click.echo("No collections stored.")
        return

    # Version and timestamps only exist on the storage_entries table
    if isinstance(store.backend, SqlKeyValueStore):
        details = {entry.key: entry.to_dict() for entry in store.backend.entries()}
    else:
        details = {}

    click.echo("\n" + "="*80)
    click.echo(f"{'Key':<20} {'Records':<9} {'Bytes':<9} {'Version':<9} {'Updated'}")
    click.echo("="*80)
    for key in keys:
        info = details.get(key, {})
        size = info.get("size", len(store.backend.get(key) or ""))
        version = info.get("version_id") or "-"
        updated = info.get("updated_at") or "-"
        click.echo(f"{key:<20} {len(store.get_all(key)):<9} {size:<9} {version:<9} {updated}")
    click.echo("="*80 + "\n")


@records_group.command('list')
@click.argument('entity')
@with_appcontext
def list_records(entity):
    """Dump a collection as JSON."""
    click.echo(json.dumps(get_record_store().get_all(entity), indent=2))


@records_group.command('show')
@click.argument('entity')
@click.argument('record_id', type=int)
@with_appcontext
def show_record(entity, record_id):
    """Show one record by id."""
    record = get_record_store().get_by_id(entity, record_id)
    if record is None:
        click.echo(f"FAIL No {entity} record with id {record_id}")
        return
    click.echo(json.dumps(record, indent=2))


@click.group('users')
def users_group():
    """User inspection commands."""


@users_group.command('list')
@with_appcontext
def list_users():
    """List all users with their roles."""
    users = get_record_store().get_all(Entity.USERS)

    if not users:
        click.echo("No users found.")
        return

    click.echo("\n" + "="*100)
    click.echo(f"{'ID':<5} {'Username':<20} {'Name':<25} {'Role':<8} {'Features'}")
    click.echo("="*100)

    for user in users:
        features = ", ".join(features_for_role(user.get("role"))) or "none"
        click.echo(
            f"{user.get('id'):<5} {user.get('username', ''):<20} {user.get('name', ''):<25} "
            f"{user.get('role', ''):<8} {features}"
        )

    click.echo("="*100 + "\n")


@click.group('laundry')
def laundry_group():
    """Laundry item commands."""


@laundry_group.command('track')
@click.argument('code')
@with_appcontext
def track_laundry(code):
    """Look up a laundry item by its code."""
    try:
        result = laundry_service.track_laundry_item(get_record_store(), code)
    except laundry_service.LaundryItemError as exc:
        click.echo(f"FAIL {exc}")
        return
    if result is None:
        click.echo(f"FAIL Laundry item {code} not found")
        return

    item = result["item"]
    click.echo(f"Code:     {item.get('code')}")
    click.echo(f"Customer: {item.get('customerName')} ({item.get('customerPhone')})")
    click.echo(f"Outlet:   {result['outletName']}")
    click.echo(f"Service:  {result['service']['name']} x {item.get('quantity')}")
    click.echo(f"Total:    {result['totalPrice']}")
    click.echo(f"Process:  {item.get('processStatus')}")
    click.echo(f"Payment:  {item.get('paymentStatus')}")


def register_commands(app):
    """Register all CLI commands with Flask app."""
    app.cli.add_command(system_group)
    app.cli.add_command(records_group)
    app.cli.add_command(users_group)
    app.cli.add_command(laundry_group)
