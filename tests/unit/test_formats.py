from __future__ import annotations

import json
import unittest
from datetime import date
from pathlib import Path
from tempfile import TemporaryDirectory
from typing import Optional

import yaml
from pydantic import BaseModel

from appres import DecodeError, EncodeError, InvalidPath, ResourceIOError
from appres.formats import (
    load_json_from_bytes,
    load_json_from_str,
    load_toml_from_str,
    load_yaml_from_str,
    pretty_save_to_json_file,
    save_to_json_file,
    save_to_toml_file,
    save_to_yaml_file,
)
from tests.helpers import resources_in

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for earlier interpreters
    import tomli as tomllib  # type: ignore[assignment]


class Settings(BaseModel):
    theme: str
    font_size: int = 12
    recent: list[str] = []
    released: Optional[date] = None


SAMPLE = {"name": "projectile", "count": 3, "ratio": 0.5, "enabled": True, "tags": ["a", "b"], "nested": {"k": "v"}}


class RoundTripTests(unittest.TestCase):
    def test_each_format_round_trips(self) -> None:
        with TemporaryDirectory() as tmpdir:
            handle = resources_in(tmpdir)
            cases = {
                "data.json": (handle.save_to_json_file, handle.load_from_json_file),
                "pretty.json": (handle.pretty_save_to_json_file, handle.load_from_json_file),
                "data.toml": (handle.save_to_toml_file, handle.load_from_toml_file),
                "data.yaml": (handle.save_to_yaml_file, handle.load_from_yaml_file),
            }
            for name, (save, load) in cases.items():
                with self.subTest(name=name):
                    self.assertFalse(handle.has_file(name))
                    written = save(name, SAMPLE)
                    self.assertEqual(written, handle.file_path(name))
                    self.assertTrue(handle.has_file(name))
                    self.assertEqual(load(name), SAMPLE)

    def test_second_save_overwrites(self) -> None:
        with TemporaryDirectory() as tmpdir:
            handle = resources_in(tmpdir)
            handle.save_to_json_file("v.json", {"value": "first-and-longer"})
            handle.save_to_json_file("v.json", {"value": "second"})
            handle.save_to_toml_file("v.toml", {"value": 1})
            handle.save_to_toml_file("v.toml", {"value": 2})
            handle.save_to_yaml_file("v.yaml", ["x", "y", "z"])
            handle.save_to_yaml_file("v.yaml", ["only"])

            self.assertEqual(handle.load_from_json_file("v.json"), {"value": "second"})
            self.assertEqual(handle.load_from_toml_file("v.toml"), {"value": 2})
            self.assertEqual(handle.load_from_yaml_file("v.yaml"), ["only"])

    def test_toml_keeps_tables_in_arrays_and_control_characters(self) -> None:
        with TemporaryDirectory() as tmpdir:
            handle = resources_in(tmpdir)
            for value in ({"a": [[{"x": 1}]]}, {"s": "tab\there\x7f \x01 end"}):
                with self.subTest(value=value):
                    handle.save_to_toml_file("edge.toml", value)
                    self.assertEqual(handle.load_from_toml_file("edge.toml"), value)

    def test_pretty_json_is_indented(self) -> None:
        with TemporaryDirectory() as tmpdir:
            handle = resources_in(tmpdir)
            handle.pretty_save_to_json_file("pretty.json", {"a": 1})
            handle.save_to_json_file("compact.json", {"a": 1})

            self.assertEqual(handle.load_from_file("pretty.json"), '{\n  "a": 1\n}\n')
            self.assertEqual(handle.load_from_file("compact.json"), '{"a":1}')

    def test_pydantic_models_are_saved_and_loaded_into_shape(self) -> None:
        with TemporaryDirectory() as tmpdir:
            handle = resources_in(tmpdir)
            settings = Settings(theme="dark", recent=["a.txt"], released=date(2024, 1, 5))
            handle.save_to_yaml_file("settings.yaml", settings)
            handle.save_to_json_file("settings.json", settings)
            handle.save_to_toml_file("settings.toml", settings.model_dump(mode="json", exclude_none=True))

            self.assertEqual(handle.load_from_yaml_file("settings.yaml", shape=Settings), settings)
            self.assertEqual(handle.load_from_json_file("settings.json", shape=Settings), settings)
            self.assertEqual(handle.load_from_toml_file("settings.toml", shape=Settings), settings)

    def test_generic_shapes(self) -> None:
        with TemporaryDirectory() as tmpdir:
            handle = resources_in(tmpdir)
            handle.save_to_json_file("ids.json", ["1", "2"])

            self.assertEqual(handle.load_from_json_file("ids.json", shape=list[int]), [1, 2])


class FailureTests(unittest.TestCase):
    def test_missing_file_is_io_error_not_decode_error(self) -> None:
        with TemporaryDirectory() as tmpdir:
            handle = resources_in(tmpdir)
            for load in (handle.load_from_json_file, handle.load_from_toml_file, handle.load_from_yaml_file):
                with self.subTest(load=load.__name__):
                    with self.assertRaises(ResourceIOError):
                        load("absent.data")

    def test_malformed_content_is_decode_error(self) -> None:
        with TemporaryDirectory() as tmpdir:
            handle = resources_in(tmpdir)
            handle.save_to_file("bad.json", '{"a": [1, 2')
            handle.save_to_file("bad.toml", "key = [1, 2\n")
            handle.save_to_file("bad.yaml", "a: [1, 2\nb: {")

            with self.assertRaises(DecodeError) as ctx:
                handle.load_from_json_file("bad.json")
            self.assertEqual(ctx.exception.format, "json")
            self.assertEqual(ctx.exception.path, handle.file_path("bad.json"))
            with self.assertRaises(DecodeError):
                handle.load_from_toml_file("bad.toml")
            with self.assertRaises(DecodeError):
                handle.load_from_yaml_file("bad.yaml")

    def test_shape_mismatch_is_decode_error(self) -> None:
        with TemporaryDirectory() as tmpdir:
            handle = resources_in(tmpdir)
            handle.save_to_yaml_file("list.yaml", ["a", "b"])

            with self.assertRaises(DecodeError):
                handle.load_from_yaml_file("list.yaml", shape=Settings)
            with self.assertRaises(DecodeError):
                handle.load_from_yaml_file("list.yaml", shape=list[int])

    def test_json_rejects_non_string_keys(self) -> None:
        with TemporaryDirectory() as tmpdir:
            handle = resources_in(tmpdir)
            with self.assertRaises(EncodeError) as ctx:
                handle.save_to_json_file("keys.json", {1: "one"})
            self.assertEqual(ctx.exception.format, "json")
            with self.assertRaises(EncodeError):
                handle.save_to_json_file("nan.json", {"x": float("nan")})
            with self.assertRaises(EncodeError):
                handle.save_to_json_file("obj.json", {"x": object()})
            self.assertFalse(handle.has_file("keys.json"))

    def test_toml_rejects_unrepresentable_values(self) -> None:
        with TemporaryDirectory() as tmpdir:
            handle = resources_in(tmpdir)
            for value in (["not", "a", "table"], {"x": None}, {"x": object()}, {"x": {2: "y"}}):
                with self.subTest(value=value):
                    with self.assertRaises(EncodeError):
                        handle.save_to_toml_file("bad.toml", value)
            self.assertFalse(handle.has_file("bad.toml"))

    def test_circular_values_are_encode_errors(self) -> None:
        looped_list: list = []
        looped_list.append(looped_list)
        looped_dict: dict = {}
        looped_dict["self"] = looped_dict

        with TemporaryDirectory() as tmpdir:
            handle = resources_in(tmpdir)
            cases = (
                ("list.json", handle.save_to_json_file, looped_list),
                ("dict.json", handle.save_to_json_file, looped_dict),
                ("list.toml", handle.save_to_toml_file, {"x": looped_list}),
                ("dict.toml", handle.save_to_toml_file, looped_dict),
            )
            for name, save, value in cases:
                with self.subTest(name=name):
                    with self.assertRaises(EncodeError):
                        save(name, value)
                    self.assertFalse(handle.has_file(name))

    def test_yaml_rejects_arbitrary_objects(self) -> None:
        with TemporaryDirectory() as tmpdir:
            handle = resources_in(tmpdir)
            with self.assertRaises(EncodeError):
                handle.save_to_yaml_file("obj.yaml", {"x": object()})

    def test_escaping_paths_fail_for_format_helpers(self) -> None:
        with TemporaryDirectory() as tmpdir:
            handle = resources_in(tmpdir)
            with self.assertRaises(InvalidPath):
                handle.save_to_yaml_file("../escape.yaml", ["x"])
            with self.assertRaises(InvalidPath):
                handle.load_from_json_file("../../etc/passwd")

    def test_nested_path_requires_ensure_dir(self) -> None:
        with TemporaryDirectory() as tmpdir:
            handle = resources_in(tmpdir)
            with self.assertRaises(ResourceIOError):
                handle.save_to_json_file("profiles/main.json", {"a": 1})

            handle.ensure_dir("profiles")
            handle.save_to_json_file("profiles/main.json", {"a": 1})
            self.assertEqual(handle.load_from_json_file("profiles/main.json"), {"a": 1})


class StandaloneHelperTests(unittest.TestCase):
    def test_load_from_strings_and_bytes(self) -> None:
        self.assertEqual(load_json_from_str('{"stuff": "Hello World"}'), {"stuff": "Hello World"})
        self.assertEqual(load_json_from_bytes(b'["a"]', shape=list[str]), ["a"])
        self.assertEqual(load_toml_from_str("stuff = 'Hello World'"), {"stuff": "Hello World"})
        self.assertEqual(load_yaml_from_str("- a\n- b\n"), ["a", "b"])
        self.assertIsNone(load_yaml_from_str(""))
        with self.assertRaises(DecodeError):
            load_json_from_bytes(b"\xff")

    def test_path_helpers_create_parent_directories(self) -> None:
        with TemporaryDirectory() as tmpdir:
            root = Path(tmpdir) / "deep" / "er"
            save_to_json_file(root / "a.json", {"a": 1})
            pretty_save_to_json_file(root / "b.json", {"b": 2})
            save_to_toml_file(root / "c.toml", {"c": 3})
            save_to_yaml_file(root / "d.yaml", {"d": 4})

            self.assertEqual(json.loads((root / "a.json").read_text(encoding="utf-8")), {"a": 1})
            self.assertEqual(json.loads((root / "b.json").read_text(encoding="utf-8")), {"b": 2})
            self.assertEqual(tomllib.loads((root / "c.toml").read_text(encoding="utf-8")), {"c": 3})
            self.assertEqual(yaml.safe_load((root / "d.yaml").read_text(encoding="utf-8")), {"d": 4})


if __name__ == "__main__":
    unittest.main()
