"""
Tests for the RAPID reference tables and the `abb` command.
"""

import asyncio

import pytest

from automation_helper.abb import (
    ABB_USAGE,
    COMMANDS,
    QUICK_REFERENCE,
    UNKNOWN_COMMAND,
    UNKNOWN_SUBCOMMAND,
    UNKNOWN_TOPIC,
    CommandEntry,
    ReferenceStore,
    format_command,
    handle_abb,
    lookup_topic,
)


def run_abb(*args):
    return asyncio.run(handle_abb(list(args)))


class TestReferenceStore:
    def test_keys_are_exactly_the_table_keys(self):
        store = ReferenceStore({"b": 2, "a": 1, "c": 3})
        assert set(store.keys()) == {"a", "b", "c"}
        assert store.keys() == ["a", "b", "c"]
        assert len(store) == 3

    def test_get_returns_none_for_missing_key(self):
        store = ReferenceStore({"a": 1})
        assert store.get("a") == 1
        assert store.get("zzz") is None
        assert "a" in store
        assert "zzz" not in store

    def test_store_is_read_only(self):
        source = {"a": 1}
        store = ReferenceStore(source)
        source["b"] = 2
        assert "b" not in store
        with pytest.raises(TypeError):
            store._entries["c"] = 3

    def test_entries_are_frozen(self):
        entry = COMMANDS.get("move_j")
        with pytest.raises(AttributeError):
            entry.name = "MoveX"

    def test_iteration_follows_sorted_keys(self):
        store = ReferenceStore({"b": "second", "a": "first"})
        assert list(store) == ["first", "second"]


class TestLookupTopic:
    @pytest.fixture
    def store(self):
        return ReferenceStore({"one": "1", "two": "2"})

    def test_no_key_lists_keys(self, store):
        out = lookup_topic(store, [], list_header="Keys:", render=str, not_found="nope")
        assert out == "Keys:\none, two"

    def test_known_key_renders_entry(self, store):
        out = lookup_topic(store, ["two"], list_header="Keys:", render=lambda v: f"<{v}>", not_found="nope")
        assert out == "<2>"

    def test_key_match_is_exact(self, store):
        out = lookup_topic(store, ["TWO"], list_header="Keys:", render=str, not_found="nope")
        assert out == "nope"

    def test_unknown_key_reports_miss(self, store):
        out = lookup_topic(store, ["three"], list_header="Keys:", render=str, not_found="nope")
        assert out == "nope"


class TestAbbCommand:
    def test_no_args_prints_usage(self):
        assert run_abb() == ABB_USAGE

    def test_help_prints_usage(self):
        assert run_abb("help") == ABB_USAGE

    def test_command_listing_contains_every_key(self):
        out = run_abb("command")
        header, keys_line = out.split("\n", 1)
        assert header == "Available commands:"
        assert set(keys_line.split(", ")) == set(COMMANDS.keys())

    @pytest.mark.parametrize("key", COMMANDS.keys())
    def test_every_command_key_returns_its_entry(self, key):
        assert run_abb("command", key) == format_command(COMMANDS.get(key))

    def test_command_format(self):
        out = run_abb("command", "move_l")
        assert out.startswith("\nCommand: MoveL\nSyntax: MoveL Target [Speed] [Zone] [Tool]\n\nExample:\n")
        assert out.endswith("\n\nDescription:\nLinear movement - moves robot in straight line to position")

    def test_unknown_command_key(self):
        assert run_abb("command", "move_x") == UNKNOWN_COMMAND

    def test_quickref_listing_contains_every_key(self):
        out = run_abb("quickref")
        header, keys_line = out.split("\n", 1)
        assert header == "Available quick reference topics:"
        assert set(keys_line.split(", ")) == set(QUICK_REFERENCE.keys())

    @pytest.mark.parametrize("key", QUICK_REFERENCE.keys())
    def test_every_quickref_key_returns_its_text(self, key):
        assert run_abb("quickref", key) == QUICK_REFERENCE.get(key).text

    def test_unknown_quickref_topic(self):
        assert run_abb("quickref", "welding") == UNKNOWN_TOPIC

    def test_list_prints_table(self):
        out = run_abb("list")
        assert out.startswith("\nABB RAPID Commands:\n================\n")
        for entry in COMMANDS:
            assert f"{entry.name:<10} - {entry.description}" in out

    def test_subcommand_match_is_exact(self):
        assert run_abb("COMMAND", "MOVE_J") == UNKNOWN_SUBCOMMAND
        assert run_abb("QuickRef", "safety") == UNKNOWN_SUBCOMMAND

    def test_key_match_is_exact(self):
        assert run_abb("command", "MOVE_J") == UNKNOWN_COMMAND
        assert run_abb("quickref", "Safety") == UNKNOWN_TOPIC

    def test_unknown_subcommand(self):
        assert run_abb("weld") == UNKNOWN_SUBCOMMAND


class TestTables:
    def test_command_entries_are_complete(self):
        for key, entry in COMMANDS.items():
            assert isinstance(entry, CommandEntry)
            assert key == key.lower()
            assert entry.name and entry.syntax and entry.example and entry.description

    def test_quickref_texts_keep_rapid_backslash_arguments(self):
        assert "\\MaxTime:=5" in QUICK_REFERENCE.get("io_handling").text
        assert "SearchL \\Stop:=di_Contact" in QUICK_REFERENCE.get("motion_patterns").text

    def test_quickref_topics_name_their_guides(self):
        for key, entry in QUICK_REFERENCE.items():
            assert entry.topic
            assert entry.topic != key
        assert QUICK_REFERENCE.get("io_handling").topic == "I/O handling"
        assert QUICK_REFERENCE.get("zone_data").text.startswith("Zone Data")
