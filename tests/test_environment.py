import io

import pytest

from minishell.environment import (
    EnvVar,
    Environment,
    assemble_envar,
    is_valid_key,
    split_assignment,
)


@pytest.mark.parametrize("key", ["PATH", "_", "a1", "_x_9", "Abc"])
def test_valid_keys(key):
    assert is_valid_key(key) is True


@pytest.mark.parametrize("key", ["", None, "1abc", "a-b", "=x", "a b", "é"])
def test_invalid_keys(key):
    assert is_valid_key(key) is False


def test_split_assignment_forms():
    assert split_assignment("A=b") == ("A", "b")
    assert split_assignment("A=") == ("A", "")
    assert split_assignment("A") == ("A", None)
    assert split_assignment("A=b=c") == ("A", "b=c")
    assert split_assignment("=v") == ("", "v")


def test_assemble_envar_round_trip():
    for arg in ["A=b", "A=", "A", "K=x=y"]:
        assert assemble_envar(*split_assignment(arg)) == arg


def test_envvar_envar_property():
    var = EnvVar("HOME", "/home/user")
    assert var.envar == "HOME=/home/user"
    var.value = None
    assert var.envar == "HOME"


def test_init_and_get():
    env = Environment(["A=1", "B=", "C"])
    assert env.get("A") == "1"
    assert env.get("B") == ""
    assert env.get("C") is None
    assert env.get("D") is None
    assert env.keys() == ["A", "B", "C"]
    assert "C" in env
    assert len(env) == 3


def test_set_none_keeps_existing_value():
    env = Environment(["A=1"])
    env.set("A", None)
    assert env.get("A") == "1"
    env.set("A", "2")
    assert env.get("A") == "2"
    assert env.keys() == ["A"]


def test_unset_removes_and_ignores_missing():
    env = Environment(["A=1", "B=2", "C=3"])
    assert env.unset("B", "MISSING") == 0
    assert env.keys() == ["A", "C"]
    env.unset("A", "C")
    assert env.keys() == []


def test_export_without_args_prints_sorted():
    env = Environment(["b=2", "a=1", "C"])
    out, err = io.StringIO(), io.StringIO()
    assert env.export([], out, err) == 0
    assert out.getvalue() == 'declare -x C\ndeclare -x a="1"\ndeclare -x b="2"\n'
    assert err.getvalue() == ""


def test_export_listing_repeatable():
    env = Environment(["X=1", "Y=2"])
    first, second = io.StringIO(), io.StringIO()
    env.print_export(first)
    env.print_export(second)
    assert first.getvalue() == second.getvalue()
    assert first.getvalue().count("declare -x ") == 2


def test_export_assigns_values():
    env = Environment(["A=old"])
    out, err = io.StringIO(), io.StringIO()
    assert env.export(["A=new", "B=", "C"], out, err) == 0
    assert env.get("A") == "new"
    assert env.get("B") == ""
    assert "C" in env and env.get("C") is None
    assert out.getvalue() == ""


def test_export_invalid_key_continues():
    env = Environment()
    out, err = io.StringIO(), io.StringIO()
    assert env.export(["=value", "1X=2", "OK=yes"], out, err) == 1
    assert env.keys() == ["OK"]
    assert "=value" in err.getvalue()
    assert "1X=2" in err.getvalue()


def test_print_env_skips_valueless():
    env = Environment(["A=1", "B", "C="])
    out = io.StringIO()
    env.print_env(out)
    assert out.getvalue() == "A=1\nC=\n"


def test_home_present_and_missing():
    assert Environment(["HOME=/tmp/h"]).home() == "/tmp/h"
    with pytest.raises(KeyError):
        Environment(["PATH=/bin"]).home()


def test_unset_then_set_appends_at_end():
    env = Environment(["A=1", "B=2"])
    env.unset("A")
    env.set("A", "3")
    assert env.keys() == ["B", "A"]
    assert env.get("A") == "3"