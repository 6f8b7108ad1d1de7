import base64
import json

import pytest
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from soraka.wx import DecryptError, PhoneNumberInfo, Watermark, decrypt_phone_number

SESSION_KEY_BYTES = bytes(range(16))
IV_BYTES = bytes(range(16, 32))
SESSION_KEY = base64.b64encode(SESSION_KEY_BYTES).decode()
IV = base64.b64encode(IV_BYTES).decode()


def _encrypt(plain: bytes, key_bytes: bytes = SESSION_KEY_BYTES, iv_bytes: bytes = IV_BYTES) -> str:
    padder = padding.PKCS7(128).padder()
    padded = padder.update(plain) + padder.finalize()
    encryptor = Cipher(algorithms.AES(key_bytes), modes.CBC(iv_bytes)).encryptor()
    return base64.b64encode(encryptor.update(padded) + encryptor.finalize()).decode()


def _document():
    return {
        "phoneNumber": "+00 0000",
        "purePhoneNumber": "0000",
        "countryCode": "00",
        "watermark": {"appid": "demo-app", "timestamp": 1700000000},
    }


def test_round_trip():
    info = decrypt_phone_number(SESSION_KEY, _encrypt(json.dumps(_document()).encode()), IV)
    assert info == PhoneNumberInfo(
        phone_number="+00 0000",
        pure_phone_number="0000",
        country_code="00",
        watermark=Watermark(appid="demo-app", timestamp=1700000000),
    )


def test_keys_match_case_insensitively():
    doc = {"PHONENUMBER": "0000", "Watermark": {"AppID": "demo-app"}}
    info = decrypt_phone_number(SESSION_KEY, _encrypt(json.dumps(doc).encode()), IV)
    assert info.phone_number == "0000"
    assert info.watermark.appid == "demo-app"


def test_null_document_gives_empty_info():
    assert decrypt_phone_number(SESSION_KEY, _encrypt(b"null"), IV) == PhoneNumberInfo()


def test_bad_base64():
    with pytest.raises(DecryptError, match="^encryptedData decode error"):
        decrypt_phone_number(SESSION_KEY, "!!!", IV)


def test_bad_key_size():
    short_key = base64.b64encode(bytes(5)).decode()
    with pytest.raises(DecryptError, match="^new cipher error"):
        decrypt_phone_number(short_key, _encrypt(b"{}"), IV)


def test_not_block_multiple():
    data = base64.b64encode(bytes(10)).decode()
    with pytest.raises(DecryptError, match="multiple of the block size"):
        decrypt_phone_number(SESSION_KEY, data, IV)


def test_bad_iv_length():
    short_iv = base64.b64encode(bytes(8)).decode()
    with pytest.raises(DecryptError):
        decrypt_phone_number(SESSION_KEY, _encrypt(b"{}"), short_iv)


def test_empty_data():
    with pytest.raises(DecryptError):
        decrypt_phone_number(SESSION_KEY, "", IV)


def test_invalid_json():
    with pytest.raises(DecryptError, match="^unmarshal decrypted phone info error"):
        decrypt_phone_number(SESSION_KEY, _encrypt(b"not json"), IV)


def test_wrong_field_type():
    doc = {"phoneNumber": 5}
    with pytest.raises(DecryptError, match="^unmarshal decrypted phone info error"):
        decrypt_phone_number(SESSION_KEY, _encrypt(json.dumps(doc).encode()), IV)