import click
from dotenv import load_dotenv
from flask import Flask
from flask.cli import with_appcontext

from config import Config
from models import db
from routes.main_routes import main_bp
from services.bank_import import import_questions
from services.store import QuestionStore, StoreError, get_store

load_dotenv()


@click.command("import-questions")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@with_appcontext
def import_questions_command(path):
    """Load question bank entries from a CSV file."""
    try:
        counts = import_questions(get_store(), path)
    except (ValueError, OSError, StoreError) as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Import finished. Created={counts['created']}, Skipped={counts['skipped']}")


def create_app(test_config=None, store=None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    db.init_app(app)
    app.extensions["question_store"] = store or QuestionStore(db.session)
    app.register_blueprint(main_bp)
    app.cli.add_command(import_questions_command)

    with app.app_context():
        db.create_all()

    return app


if __name__ == "__main__":
    create_app().run(debug=True)
