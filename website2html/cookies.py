import json
import os

from .settings import COOKIE_KEYS, SAME_SITE_VALUES


def resolve_cookie_path(cookie_file, cwd=None):
    path = os.path.expanduser(cookie_file)
    if not os.path.isabs(path):
        path = os.path.join(cwd or os.getcwd(), path)
    if not os.path.isfile(path):
        raise FileNotFoundError(f'Cannot find cookie file "{path}"')
    return path


def normalize_same_site(value):
    if value is None:
        return None
    return SAME_SITE_VALUES.get(str(value).strip().lower())


def normalize_cookie(record):
    """Keep only the fields Playwright accepts when installing a cookie.

    Cookie exports from browsers and extensions carry bookkeeping keys
    (size, session, priority, hostOnly, ...) that the driver rejects.
    """
    cookie = {key: record[key] for key in COOKIE_KEYS if key in record}
    if "sameSite" in cookie:
        same_site = normalize_same_site(cookie["sameSite"])
        if same_site:
            cookie["sameSite"] = same_site
        else:
            del cookie["sameSite"]
    if "expires" not in cookie and "expirationDate" in record:
        cookie["expires"] = record["expirationDate"]
    return cookie


def load_cookies(path):
    with open(path, "r", encoding="utf-8") as handle:
        data = json.load(handle)

    if not isinstance(data, list):
        raise ValueError(f'Cookie file "{path}" must contain a JSON array.')

    cookies = []
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise ValueError(
                f'Cookie #{index + 1} in "{path}" is not a JSON object.'
            )
        cookies.append(normalize_cookie(record))
    return cookies
