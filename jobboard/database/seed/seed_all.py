from flask.cli import with_appcontext
from jobboard.database.seed.seed_users import seed as seed_users
from jobboard.database.seed.seed_jobs import seed as seed_jobs
from jobboard.database.seed.seed_applications import seed as seed_applications
from jobboard.extensions import db

import click


@click.command("create-tables")
@with_appcontext
def create_tables():
    """Create all tables without running migrations."""
    db.create_all()
    click.echo("✅ Tables created")


@click.command("seed-all")
@with_appcontext
def seed_all():
    """Run all database seeders."""
    click.echo("🌱 Seeding database...")
    db.create_all()
    users = seed_users()
    jobs = seed_jobs()
    applications = seed_applications()
    click.echo(f"✅ All seeders completed! ({users} users, {jobs} jobs, {applications} applications)")
