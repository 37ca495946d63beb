# singleactivity/commands.py
import click
from singleactivity.extensions import db
from singleactivity.models.module_type import ModuleType
from singleactivity.models.user import User
from singleactivity.domain.capabilities import ROLE_CAPABILITIES

# name, full name, has its own page, adds navigation nodes
DEFAULT_MODULE_TYPES = (
    ("assign", "Assignment", True, False),
    ("book", "Book", True, True),
    ("forum", "Forum", True, True),
    ("glossary", "Glossary", True, False),
    ("label", "Text and media area", False, False),
    ("lesson", "Lesson", True, False),
    ("page", "Page", True, False),
    ("quiz", "Quiz", True, True),
    ("scorm", "SCORM package", True, True),
    ("url", "URL", True, False),
    ("wiki", "Wiki", True, True),
)


def seed_module_types() -> int:
    """Register the default module types that are missing. Returns how many."""
    existing = {t.name for t in ModuleType.query.all()}
    added = 0
    for name, fullname, has_view, extends_navigation in DEFAULT_MODULE_TYPES:
        if name in existing:
            continue
        module_type = ModuleType()
        module_type.name = name
        module_type.fullname = fullname
        module_type.has_view = has_view
        module_type.extends_navigation = extends_navigation
        db.session.add(module_type)
        added += 1

    db.session.commit()
    return added


def register_commands(app):
    @app.cli.command("seed-module-types")
    def seed_module_types_command():
        """Register the default module types."""
        added = seed_module_types()
        click.echo(f"Added {added} module types")

    @app.cli.command("create-user")
    @click.argument("email")
    @click.argument("password")
    @click.option("--role", default="student", type=click.Choice(sorted(ROLE_CAPABILITIES)))
    def create_user_command(email, password, role):
        """Create a user who can log in to the API."""
        if User.query.filter_by(email=email).first():
            raise click.ClickException(f"User {email} already exists")

        user = User()
        user.email = email
        user.role = role
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        click.echo(f"Created {role} {email} ({user.id})")
