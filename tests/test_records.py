# tests/test_records.py

import pytest
from appseed.errors import RecordValidationError
from appseed.storage.models import AppRecord, Permission


def test_record_from_document(app_doc):
    rec = AppRecord.from_dict(app_doc)
    assert rec.id == "eff83ce8bd790069"
    assert rec.description == "lhty2"
    assert rec.numeric_key == 10000001
    assert rec.permissions == [Permission(prefix="/LHTY2.")]
    assert len(rec.channels) == 4
    assert rec.to_dict() == app_doc


@pytest.mark.parametrize("field", ["_id", "desc", "key", "secret", "fingerprint", "permissions", "channels"])
def test_missing_field_rejected(app_doc, field):
    del app_doc[field]
    with pytest.raises(RecordValidationError):
        AppRecord.from_dict(app_doc)


@pytest.mark.parametrize("key", [-1, 2 ** 32, "10000001", True])
def test_bad_numeric_key_rejected(app_doc, key):
    app_doc["key"] = key
    with pytest.raises(RecordValidationError):
        AppRecord.from_dict(app_doc)


def test_empty_id_rejected(app_doc):
    app_doc["_id"] = ""
    with pytest.raises(RecordValidationError):
        AppRecord.from_dict(app_doc)


def test_invalid_permission_regexp_rejected(app_doc):
    app_doc["permissions"] = [{"regexp": "("}]
    with pytest.raises(RecordValidationError):
        AppRecord.from_dict(app_doc)


def test_permission_criteria():
    assert Permission(prefix="/LHTY2.").is_permitted("/LHTY2.Gift/Send")
    assert not Permission(prefix="/LHTY2.").is_permitted("/Other.Gift/Send")
    assert Permission(path="/a/b").is_permitted("/a/b")
    assert not Permission(path="/a/b").is_permitted("/a/b/c")
    assert Permission(prefix="/a/", regexp=r"/b$").is_permitted("/a/b")
    assert not Permission(prefix="/a/", regexp=r"/b$").is_permitted("/a/c")
    # all criteria empty permits everything
    assert Permission().is_permitted("/anything")


def test_permission_document_skips_empty_criteria():
    assert Permission(prefix="/x.").to_dict() == {"prefix": "/x."}


def test_record_permissions_with_common(app_doc):
    rec = AppRecord.from_dict(app_doc)
    assert rec.is_permitted("/LHTY2.Role/Get")
    assert not rec.is_permitted("/libra.Ping/Ping")
    assert rec.is_permitted("/libra.Ping/Ping", common=[Permission(prefix="/libra.")])


def test_check_secret(app_doc):
    rec = AppRecord.from_dict(app_doc)
    assert rec.check_secret("393424f62ceb82f2896a29598769db96")
    assert not rec.check_secret("wrong")
    assert not rec.check_secret("")
