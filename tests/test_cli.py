import pytest
from hypothesis import given, strategies as st
from typer.testing import CliRunner

from failfast.cli import app


runner = CliRunner()


class TestCLIBasicFunctionality:
    def test_help_command_works(self):
        """Test that --help lists both commands."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "demo" in result.stdout
        assert "compare" in result.stdout

    def test_compare_help_works(self):
        result = runner.invoke(app, ["compare", "--help"])

        assert result.exit_code == 0
        assert "--target" in result.stdout
        assert "--vowels" in result.stdout
        assert "--strategy" in result.stdout


class TestDemoCommand:
    def test_default_demo(self):
        result = runner.invoke(app, ["demo"])

        assert result.exit_code == 0
        assert "Initial: [A, B, C, D, E]" in result.stdout
        assert "ConcurrentMutationError" in result.stdout
        assert "remaining: [A, B, C, E]" in result.stdout
        assert "All strategies agree." in result.stdout

    def test_custom_values(self):
        result = runner.invoke(app, ["demo", "-v", "X", "-v", "Y", "-v", "Z", "--target", "Y"])

        assert result.exit_code == 0
        assert "Initial: [X, Y, Z]" in result.stdout
        assert "cursor" in result.stdout
        assert "[X, Z]" in result.stdout

    def test_empty_target_rejected(self):
        result = runner.invoke(app, ["demo", "--target", ""])

        assert result.exit_code == 2


class TestCompareCommand:
    def test_compare_with_target(self):
        result = runner.invoke(app, ["compare", "A", "B", "C", "D", "E", "--target", "D"])

        assert result.exit_code == 0
        assert "Input: [A, B, C, D, E]" in result.stdout
        for name in ["cursor", "remove-where", "collect-then-remove", "reverse-index", "filter-copy"]:
            assert f"{name}: [A, B, C, E]" in result.stdout

    def test_compare_with_vowels(self):
        result = runner.invoke(app, ["compare", "Apple", "Banana", "Cherry", "Egg", "Date", "--vowels"])

        assert result.exit_code == 0
        assert "remove-where: [Banana, Cherry, Date]" in result.stdout

    def test_single_strategy(self):
        result = runner.invoke(app, ["compare", "A", "B", "--target", "A", "--strategy", "filter-copy"])

        assert result.exit_code == 0
        assert "filter-copy: [B]" in result.stdout
        assert "cursor:" not in result.stdout

    def test_unknown_strategy(self):
        result = runner.invoke(app, ["compare", "A", "--target", "A", "--strategy", "shuffle"])

        assert result.exit_code == 2

    @pytest.mark.parametrize("args", [["A", "B"], ["A", "B", "--target", "A", "--vowels"]])
    def test_bad_predicate_options(self, args):
        result = runner.invoke(app, ["compare", *args])

        assert result.exit_code == 2

    @given(values=st.lists(st.sampled_from(["A", "B", "C"]), min_size=1, max_size=8))
    def test_strategies_always_agree(self, values):
        """For any input, the compare command exits cleanly."""
        result = runner.invoke(app, ["compare", *values, "--target", "B"])

        assert result.exit_code == 0
        expected = "[" + ", ".join(v for v in values if v != "B") + "]"
        assert f"filter-copy: {expected}" in result.stdout
