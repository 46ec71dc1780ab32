from fastapi import Request

from wiremit.core.config import Settings
from wiremit.db.dal import Database
from wiremit.services.rates.quote_service import RateQuoteService

# Dependencies -----------------------------------------------------
# create_app() stores settings and the rate quote holder on app.state so a
# test app built with settings_override never touches the cached globals.


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request) -> Database:
    settings = get_app_settings(request)
    return Database(settings.db_path, users_record_key=settings.users_record_key)


def get_quote_service(request: Request) -> RateQuoteService:
    return request.app.state.quote_service
