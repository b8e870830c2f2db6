import logging

from flask import Flask

from .config import DatabaseSettings, settings


def create_app(test_config=None):
    app = Flask(__name__)

    # Load configuration from settings
    app.config.from_mapping(
        DEBUG=settings.DEBUG,
        ENVIRONMENT=settings.ENVIRONMENT,
        DB_HOST=settings.DB_HOST,
        DB_USER=settings.DB_USER,
        DB_PASSWORD=settings.DB_PASSWORD,
        DB_NAME=settings.DB_NAME,
        DB_PORT=settings.DB_PORT,
        DB_DRIVER=settings.DB_DRIVER,
        DATABASE_URL=settings.DATABASE_URL,
        DB_CONNECT_RETRIES=settings.DB_CONNECT_RETRIES,
        DB_RETRY_DELAY=settings.DB_RETRY_DELAY,
    )

    if test_config:
        app.config.update(test_config)

    db_settings = DatabaseSettings.from_mapping(app.config)
    app.extensions["db_settings"] = db_settings

    from .routes import bp as visits_bp
    from .security import add_cors_headers

    app.register_blueprint(visits_bp)
    app.after_request(add_cors_headers)

    # helper to create and seed the two tables for local runs and tests
    def init_db(message="Hello from the database!", count=0):
        from sqlalchemy import create_engine, func, insert, select

        from .models import messages, metadata, visits

        engine = create_engine(db_settings.database_url)
        try:
            metadata.create_all(bind=engine)
            with engine.begin() as conn:
                if conn.execute(select(func.count()).select_from(messages)).scalar() == 0:
                    conn.execute(insert(messages).values(text=message))
                if conn.execute(select(visits.c.id).where(visits.c.id == 1)).first() is None:
                    conn.execute(insert(visits).values(id=1, count=count))
        except Exception as e:
            logging.exception("init_db failed: %s", e)
            # re-raise so callers (tests) can handle or log as needed
            raise
        finally:
            engine.dispose()

    app.init_db = init_db

    return app
