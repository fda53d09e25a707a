import json

import pytest

from modelq.shared.errors import SchemaError
from modelq.shared.schema_loader import collect_schema_paths, load_schema


class TestLoadSchema:
    def test_load_yaml(self, tmp_path):
        schema_path = tmp_path / "shop.yaml"
        schema_path.write_text("""
database: shop
tables:
  users:
    - name: id
      type: bigint
""")

        data = load_schema(schema_path)
        assert data["database"] == "shop"
        assert data["tables"]["users"][0]["type"] == "bigint"

    def test_load_json(self, tmp_path):
        schema_path = tmp_path / "shop.json"
        schema_path.write_text('{"tables": {"users": [{"name": "id", "type": "int"}]}}')

        data = load_schema(schema_path)
        assert data["tables"]["users"][0]["name"] == "id"

    def test_load_tab_indented_json(self, tmp_path):
        schema_path = tmp_path / "shop.json"
        schema_path.write_text(
            json.dumps(
                {
                    "database": "shop",
                    "tables": {"users": [{"name": "id", "type": "bigint"}]},
                },
                indent="\t",
            )
        )

        data = load_schema(schema_path)
        assert data["database"] == "shop"
        assert data["tables"]["users"] == [{"name": "id", "type": "bigint"}]

    def test_invalid_json(self, tmp_path):
        schema_path = tmp_path / "bad.json"
        schema_path.write_text('{"tables": ')

        with pytest.raises(SchemaError, match="Invalid JSON"):
            load_schema(schema_path)

    def test_json_suffix_is_case_insensitive(self, tmp_path):
        schema_path = tmp_path / "SHOP.JSON"
        schema_path.write_text('{\n\t"tables": {}\n}')

        assert load_schema(schema_path) == {"tables": {}}

    def test_missing_file(self, tmp_path):
        with pytest.raises(SchemaError, match="Failed to read schema file"):
            load_schema(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        schema_path = tmp_path / "bad.yaml"
        schema_path.write_text("tables: [unclosed")

        with pytest.raises(SchemaError, match="Invalid YAML"):
            load_schema(schema_path)

    def test_root_must_be_mapping(self, tmp_path):
        schema_path = tmp_path / "list.yaml"
        schema_path.write_text("- users\n- orders\n")

        with pytest.raises(SchemaError, match="Schema root must be a mapping"):
            load_schema(schema_path)


class TestCollectSchemaPaths:
    def test_collect_files_and_directories(self, tmp_path):
        schema_dir = tmp_path / "schemas"
        schema_dir.mkdir()
        (schema_dir / "b.yaml").write_text("tables: {}")
        (schema_dir / "a.yml").write_text("tables: {}")
        (schema_dir / "c.json").write_text("{}")
        (schema_dir / "notes.txt").write_text("ignored")
        single = tmp_path / "single.yaml"
        single.write_text("tables: {}")

        paths = collect_schema_paths([schema_dir, single])

        assert [p.name for p in paths] == ["a.yml", "b.yaml", "c.json", "single.yaml"]

    def test_explicit_file_kept_regardless_of_suffix(self, tmp_path):
        schema_path = tmp_path / "schema.txt"
        schema_path.write_text("tables: {}")

        assert collect_schema_paths([schema_path]) == [schema_path.resolve()]

    def test_collect_deduplicates(self, tmp_path):
        single = tmp_path / "single.yaml"
        single.write_text("tables: {}")

        paths = collect_schema_paths([single, single])
        assert paths == [single.resolve()]

    def test_missing_path(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            collect_schema_paths([tmp_path / "nope"])

    def test_empty_directory(self, tmp_path):
        assert collect_schema_paths([tmp_path]) == []
