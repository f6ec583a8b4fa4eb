from datetime import datetime

import pytz
from flask import current_app, has_app_context

DEFAULT_TIMEZONE = "Africa/Lagos"


def get_local_time():
    tz_name = DEFAULT_TIMEZONE
    if has_app_context():
        tz_name = current_app.config.get("TIMEZONE", DEFAULT_TIMEZONE)
    return datetime.now(pytz.timezone(tz_name))


def start_of_month(now=None):
    now = now or get_local_time()
    return now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
