import os


PROG_NAME = "website2html"

# Navigation finishes on the window "load" event, not the first response.
NAVIGATION_WAIT_UNTIL = "load"

BUNDLED_BROWSERS_DIR = "playwright-browsers"

COOKIE_KEYS = (
    "name",
    "value",
    "url",
    "domain",
    "path",
    "expires",
    "httpOnly",
    "secure",
    "sameSite",
)
SAME_SITE_VALUES = {
    "lax": "Lax",
    "strict": "Strict",
    "none": "None",
    "no_restriction": "None",
}
