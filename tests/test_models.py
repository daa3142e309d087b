import json

from zip2meta.models import ArchiveEntryInfo, CompressionMethod


def test_entry_to_json_keeps_field_order():
    entry = ArchiveEntryInfo(
        name="docs/readme.txt",
        comment="",
        modified_epoch_seconds=1704164646,
        size=0,
        method=CompressionMethod.DEFLATE,
        is_directory=False,
    )

    line = entry.to_json()

    assert "\n" not in line
    assert line == (
        '{"name":"docs/readme.txt","comment":"","modifiedEpochSeconds":1704164646,'
        '"size":0,"method":2,"isDirectory":false}'
    )
    assert list(json.loads(line)) == ["name", "comment", "modifiedEpochSeconds", "size", "method", "isDirectory"]


def test_entry_to_json_keeps_non_ascii_text():
    entry = ArchiveEntryInfo(
        name="测试.txt",
        comment="é",
        modified_epoch_seconds=0,
        size=0,
        method=CompressionMethod.UNSPECIFIED,
        is_directory=False,
    )

    assert '"name":"测试.txt"' in entry.to_json()
    assert json.loads(entry.to_json())["comment"] == "é"
