import os
import sys
import time


FIELD_ORDER = (
    "url",
    "cookies",
    "screenshot",
    "headless",
    "user_agent",
    "path",
    "count",
    "error",
)
LEVEL_COLORS = {
    "INFO": "\x1b[32m",
    "WARN": "\x1b[33m",
    "ERROR": "\x1b[31m",
}
RESET_COLOR = "\x1b[0m"
_VERBOSE = False


def normalize_log_value(value):
    if value is None:
        return ""
    text = str(value)
    if not text:
        return ""
    return " ".join(text.split())


def format_log_fields(fields):
    parts = []
    keys = []
    for key in FIELD_ORDER:
        if key in fields:
            keys.append(key)
    for key in sorted(fields.keys()):
        if key not in keys:
            keys.append(key)
    for key in keys:
        value = fields.get(key)
        text = normalize_log_value(value)
        if text == "":
            continue
        if " " in text or "=" in text:
            text = f'"{text}"'
        parts.append(f"{key}={text}")
    return " | ".join(parts)


def colorize_level(level):
    # stdout carries the page HTML, so every log line is written to stderr.
    if not sys.stderr.isatty():
        return level
    if os.getenv("NO_COLOR"):
        return level
    color = LEVEL_COLORS.get(level)
    if not color:
        return level
    return f"{color}{level}{RESET_COLOR}"


def log(level, message, **fields):
    if level == "INFO" and not _VERBOSE:
        return
    timestamp = time.strftime("%H:%M:%S")
    suffix = format_log_fields(fields)
    level_text = colorize_level(level)
    if suffix:
        print(f"[{timestamp}] {level_text}: {message} | {suffix}", file=sys.stderr)
    else:
        print(f"[{timestamp}] {level_text}: {message}", file=sys.stderr)


def set_verbose(enabled):
    global _VERBOSE
    _VERBOSE = bool(enabled)


def log_info(message, **fields):
    log("INFO", message, **fields)


def log_warn(message, **fields):
    log("WARN", message, **fields)


def log_error(message, **fields):
    log("ERROR", message, **fields)
