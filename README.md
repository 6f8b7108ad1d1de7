# soraka

Building blocks for web backends, constants and automation helpers for a
game client, and a small template-based code generator.

## Modules

| Module | Purpose |
| --- | --- |
| `soraka.stringx` | camel/snake case conversion, first-letter case, random 24-character passwords, order-insensitive list comparison |
| `soraka.timex` | round a datetime down to a five-minute mark |
| `soraka.ecode` | numeric result codes (`Code`) and their Chinese messages (`text`) |
| `soraka.crypto` | SHA-256 / MD5 hex digests, salted bcrypt hashing, salt generation |
| `soraka.options` | `PageParam`, `PageResult`, `Option` and `OptionWithPy` records |
| `soraka.timeutil` | `parse_local_time` and `format_local_time` for JSON timestamps |
| `soraka.tokens` | HS256 tokens with `JWT`, claims dataclasses, `parse_duration` with day units |
| `soraka.validators` | phone number, number and decimal-place checks, Chinese messages via `translate` |
| `soraka.wx` | `decrypt_phone_number` for AES-CBC encrypted phone number payloads |
| `soraka.response` | JSON `Body` results built around result codes, XML envelopes |
| `soraka.keyprefix` | per-platform key prefixes for key-value store commands, set through context managers |
| `soraka.throttle` | `RateLimiter` token bucket, `Debouncer`, browser fingerprints, whitespace trimming |
| `soraka.consts` | game-flow phases, queue, tier and server names, champion list with `champion_by_id` and `search_champions` |
| `soraka.automation` | `AutomationUseCase`: accept ready checks, pick and ban, accept trades and swaps, apply rune pages |
| `soraka.tmpl` | render `{{.Field}}` templates for model names into source files; `soraka-tmpl` command |

## Installation

```
pip install soraka
```

For running the tests:

```
pip install "soraka[test]"
pytest
```

## Examples

```python
from soraka.stringx import camel_to_snake, snake_to_big_camel
from soraka.ecode import Code, text
from soraka.crypto import bcrypt_hash, bcrypt_check, generate_salt
from soraka.validators import validate_non_negative_number
from soraka.consts import search_champions

camel_to_snake("XxYy")          # "xx_yy"
snake_to_big_camel("xx_yy")     # "XxYy"
text(Code.FAILED)               # "系统错误"

password = "password"
salt = generate_salt()
hashed = bcrypt_hash(password, salt)
bcrypt_check(password, salt, hashed)   # True

validate_non_negative_number("1.5")    # True

for champion in search_champions("奶妈"):
    print(champion.label)
```

Response bodies:

```python
from soraka.ecode import Code
from soraka.response import success, fail

success({"id": 1}).to_json()
fail(Code.PARAMS_FAILED, "bad id").msg   # "参数校验错误:bad id"
```

Key prefixes:

```python
from soraka.keyprefix import PlatformKeyHook, db_key

hook = PlatformKeyHook()
with db_key("tenant"):
    hook.before_process(["GET", "k"])   # ["GET", "tenant_k"]
```

Tokens:

```python
from soraka.tokens import JWT, BaseClaims, parse_duration

parse_duration("1d")            # timedelta(days=1)
signer = JWT()
claims = signer.create_claims(BaseClaims(user_id=1, platform="demo"))
access = signer.create_token(claims)
access, refresh = signer.create_token_pair(claims)
signer.parse_token(access).base_claims.user_id   # 1
```

`JWT.parse_token` returns the claims of an expired token rather than
raising. It raises `TokenNotValidYet` for an empty or not yet active token,
`TokenMalformed` for undecodable input and `TokenInvalid` for a bad
signature; all are subclasses of `TokenError`.

## Code generation

`soraka-tmpl generate tmpl --models BaseUser,BaseRole` reads
`<folder>.go.tpl` templates (`req`, `vo`, `repo`, `biz`, `service`) from
`--defaultTempPath` and writes `<targetPkgPath>/<folder>/<pkg>/<snake_name>.go`
for each model. Both paths are taken relative to the parent of the current
directory. `--to` limits generation to folders containing its value;
`--project` and `--pkg` fill `{{.ProjectName}}` and `{{.PkgName}}`. See:

```
soraka-tmpl --help
```

The `generate` function in `soraka.tmpl` does the same from Python with an
explicit base directory.

## What the package does not do

It runs no HTTP server and has no request middleware, database access or
persistent storage. `AutomationUseCase` does not talk to the game client by
itself: the caller supplies the game-flow, champion-select and rune-page
repository objects it calls.