"""Backend helpers: strings, time, result codes, tokens, validators, responses, key prefixes, throttling, game constants, automation and templates."""

__version__ = "1.0.0"

__all__ = [
    "automation",
    "consts",
    "crypto",
    "ecode",
    "keyprefix",
    "options",
    "response",
    "stringx",
    "throttle",
    "timeutil",
    "timex",
    "tmpl",
    "tokens",
    "validators",
    "wx",
]