"""
Integration tests for the DIMS export API.
"""
import csv
import io

from dims_export.export.csv_writer import header_line


def _rows(body: bytes):
    return list(csv.reader(io.StringIO(body.decode("utf-8"), newline="")))


def test_health(client, api_prefix):
    response = client.get(f"{api_prefix}/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_export_csv(client, api_prefix, sample_records):
    response = client.post(
        f"{api_prefix}/exports/dims",
        json={"records": sample_records, "settings": {"site_id": "812"}},
    )

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert response.headers["x-exported-count"] == "2"
    assert response.headers["x-error-count"] == "0"
    disposition = response.headers["content-disposition"]
    assert 'filename="812_' in disposition
    assert "filename*=UTF-8''812_" in disposition
    assert disposition.endswith(".csv")

    body = response.content
    assert body.startswith(header_line().encode("utf-8") + b"\r\n")
    assert not body.startswith(b"\xef\xbb\xbf")

    rows = _rows(body)
    assert [r[0] for r in rows[1:]] == ["Widget-A", "widget-b"]
    assert rows[1][3:9] == ["10", "5", "2", "3", "100", "0.6024"]
    assert rows[1][13] == "812"


def test_export_non_ascii_site_id(client, api_prefix, sample_records):
    response = client.post(
        f"{api_prefix}/exports/dims",
        json={"records": sample_records, "settings": {"site_id": "東京"}},
    )

    assert response.status_code == 200
    disposition = response.headers["content-disposition"]
    assert disposition.startswith('attachment; filename="___')
    assert "filename*=UTF-8''%E6%9D%B1%E4%BA%AC_" in disposition
    assert _rows(response.content)[1][13] == "東京"


def test_export_uses_stored_settings(client, api_prefix, sample_records):
    put = client.put(
        f"{api_prefix}/exports/dims/settings",
        json={"dim_unit": "cm", "wgt_unit": "kg", "vol_unit": "cm", "factor": 6000},
    )
    assert put.status_code == 200

    response = client.post(f"{api_prefix}/exports/dims", json={"records": sample_records})

    rows = _rows(response.content)
    assert rows[1][3] == "25.4"
    assert rows[1][9:13] == ["cm", "kg", "cm", "6000"]


def test_export_part_selection(client, api_prefix, sample_records):
    response = client.post(
        f"{api_prefix}/exports/dims",
        json={"records": sample_records, "part_numbers": ["widget-a"]},
    )

    rows = _rows(response.content)
    assert [r[0] for r in rows[1:]] == ["Widget-A"]
    assert response.headers["x-exported-count"] == "1"


def test_export_empty_records(client, api_prefix):
    response = client.post(f"{api_prefix}/exports/dims", json={"records": []})

    assert response.status_code == 200
    assert response.content == header_line().encode("utf-8") + b"\r\n"
    assert response.headers["x-exported-count"] == "0"


def test_export_missing_records_rejected(client, api_prefix):
    response = client.post(f"{api_prefix}/exports/dims", json={})

    assert response.status_code == 422


def test_export_bad_factor_rejected(client, api_prefix, sample_records):
    response = client.post(
        f"{api_prefix}/exports/dims",
        json={"records": sample_records, "settings": {"factor": "heavy"}},
    )

    assert response.status_code == 422


def test_preview(client, api_prefix, sample_records):
    response = client.post(
        f"{api_prefix}/exports/dims/preview",
        json={"records": sample_records, "settings": {"wgt_unit": "kg"}},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["filename"].startswith("733_")
    assert [p["part_number"] for p in data["parts"]] == ["Widget-A", "widget-b"]
    assert data["parts"][0]["image_count"] == 2
    assert data["parts"][0]["date_range"] == "01/01 - 01/02"
    assert data["exported_count"] == 2
    assert data["error_count"] == 0
    assert [m["level"] for m in data["messages"]] == ["warning", "info"]


def test_settings_roundtrip(client, api_prefix, settings_file):
    initial = client.get(f"{api_prefix}/exports/dims/settings")
    assert initial.json()["site_id"] == "733"

    client.put(f"{api_prefix}/exports/dims/settings", json={"site_id": "900", "opt_info_3": "N"})

    stored = client.get(f"{api_prefix}/exports/dims/settings").json()
    assert stored["site_id"] == "900"
    assert stored["opt_info_3"] == "N"
    assert stored["factor"] == 166
    assert settings_file.exists()
