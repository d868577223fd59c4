import json

import pytest
import yaml

from inivars import Namespace, OutputFormat, ParseOptions, export, read_ini, read_ini_text
from inivars.exporters import shell_quote


def test_shell_quote_plain():
    assert shell_quote("value") == "$'value'"


def test_shell_quote_escapes_quotes_and_backslashes():
    assert shell_quote("it's") == "$'it\\'s'"
    assert shell_quote("C:\\temp") == "$'C:\\\\temp'"


def test_shell_export_assignments_and_metadata():
    ns = Namespace()
    result = read_ini_text("[s]\nk = v\nflag = yes\n", namespace=ns)
    out = export(result, ns, OutputFormat.SHELL)
    assert out.splitlines() == [
        "INI__s__k=$'v'",
        "INI__s__flag=$'1'",
        "INI__ALL_VARS=$'INI__s__k INI__s__flag'",
        "INI__ALL_SECTIONS=$'s'",
        "INI__NUMSECTIONS=$'1'",
    ]


def test_shell_export_duplicate_keys_emit_last_value_once():
    ns = Namespace()
    result = read_ini_text("k = 1\nk = 2\n", namespace=ns)
    lines = export(result, ns, OutputFormat.SHELL).splitlines()
    assert lines[0] == "INI__k=$'2'"
    assert sum(1 for line in lines if line.startswith("INI__k=")) == 1


def test_shell_export_after_reset_unsets():
    ns = Namespace()
    read_ini_text("a = 1\n", namespace=ns)
    result = read_ini(None, ParseOptions(reset=True), namespace=ns)
    out = export(result, ns, OutputFormat.SHELL)
    assert out == (
        "unset ${INI__ALL_VARS-}\n"
        "unset INI__a INI__ALL_VARS INI__ALL_SECTIONS INI__NUMSECTIONS\n"
    )


def test_shell_export_reset_and_reparse_keeps_reassigned_names_set():
    ns = Namespace()
    read_ini_text("a = 1\nb = 2\n", namespace=ns)
    result = read_ini_text("b = 3\n", ParseOptions(reset=True), namespace=ns)
    lines = export(result, ns, OutputFormat.SHELL).splitlines()
    assert lines[0] == "unset ${INI__ALL_VARS-}"
    assert lines[1] == "unset INI__a"
    assert "INI__b=$'3'" in lines


def test_json_export():
    ns = Namespace()
    result = read_ini_text("[a]\nx = 1\n[b]\ny = 'two'\n", namespace=ns)
    doc = json.loads(export(result, ns, OutputFormat.JSON))
    assert doc == {
        "INI__a__x": "1",
        "INI__b__y": "two",
        "INI__ALL_VARS": "INI__a__x INI__b__y",
        "INI__ALL_SECTIONS": "a b",
        "INI__NUMSECTIONS": 2,
    }


def test_yaml_export_keeps_strings():
    result = read_ini_text("flag = on\nname = 'yes'\n")
    doc = yaml.safe_load(export(result, None, OutputFormat.YAML))
    assert doc["INI__flag"] == "1"
    assert doc["INI__name"] == "yes"
    assert doc["INI__NUMSECTIONS"] == 0


def test_export_accepts_format_string():
    result = read_ini_text("k = v\n")
    assert json.loads(export(result, None, "json"))["INI__k"] == "v"


def test_export_rejects_table():
    result = read_ini_text("k = v\n")
    with pytest.raises(ValueError):
        export(result, None, OutputFormat.TABLE)


def test_shell_export_without_reset_has_no_unset_lines():
    ns = Namespace()
    result = read_ini_text("a = 1\n", namespace=ns)
    assert not any(line.startswith("unset") for line in export(result, ns, OutputFormat.SHELL).splitlines())


def test_shell_export_reset_uses_own_prefix():
    ns = Namespace()
    result = read_ini(None, ParseOptions(prefix="APP", reset=True), namespace=ns)
    lines = export(result, ns, OutputFormat.SHELL).splitlines()
    assert lines[0] == "unset ${APP__ALL_VARS-}"
    assert lines[1] == "unset APP__ALL_VARS APP__ALL_SECTIONS APP__NUMSECTIONS"
