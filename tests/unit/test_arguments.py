"""Tests for the filter argument parser"""

import pytest

from laraboot.cli.arguments import Proceed, ShowHelp, UnknownArgument, parse_arguments


def filters_for(argv):
    outcome = parse_arguments(argv)
    assert isinstance(outcome, Proceed)
    return outcome.filters


class TestFilters:
    """--skip / --without / --only handling"""

    def test_no_arguments(self):
        """No arguments means no filters"""
        filters = filters_for([])
        assert filters.skip == frozenset()
        assert filters.only == frozenset()

    @pytest.mark.parametrize("flag", ["--skip", "--without"])
    def test_skip_list_is_comma_separated(self, flag):
        """Both skip spellings split their value on commas"""
        filters = filters_for([flag, "npm_install,npm_build"])
        assert filters.skip == {"npm_install", "npm_build"}
        assert filters.only == frozenset()

    def test_only_list(self):
        """--only fills the include list"""
        filters = filters_for(["--only", "migrate,seed"])
        assert filters.only == {"migrate", "seed"}

    def test_skip_and_only_together(self):
        """Both filters can be given at once"""
        filters = filters_for(["--only", "migrate,seed", "--skip", "seed"])
        assert filters.only == {"migrate", "seed"}
        assert filters.skip == {"seed"}

    def test_later_list_replaces_earlier(self):
        """A repeated flag replaces the previous list"""
        filters = filters_for(["--skip", "migrate", "--without", "seed"])
        assert filters.skip == {"seed"}

    @pytest.mark.parametrize("flag", ["--skip", "--without", "--only"])
    def test_trailing_flag_without_value_is_ignored(self, flag):
        """A filter flag in last position is silently dropped"""
        filters = filters_for([flag])
        assert filters.skip == frozenset()
        assert filters.only == frozenset()

    def test_trailing_flag_keeps_earlier_lists(self):
        """Dropping a trailing flag leaves the other filter alone"""
        filters = filters_for(["--skip", "seed", "--only"])
        assert filters.skip == {"seed"}
        assert filters.only == frozenset()

    def test_value_is_taken_verbatim(self):
        """The token after a filter flag is its value even if it looks like a flag"""
        filters = filters_for(["--skip", "--only"])
        assert filters.skip == {"--only"}
        assert filters.only == frozenset()

    def test_empty_value(self):
        """An empty value yields a single empty name"""
        filters = filters_for(["--only", ""])
        assert filters.only == {""}


class TestControlFlow:
    """Help and unknown arguments"""

    @pytest.mark.parametrize("flag", ["-h", "--help"])
    def test_help(self, flag):
        """Help is reported, not acted on"""
        assert parse_arguments([flag]) == ShowHelp()

    def test_help_after_filters(self):
        """Help wins over filters that came before it"""
        assert parse_arguments(["--skip", "seed", "--help"]) == ShowHelp()

    def test_unknown_argument(self):
        """Unrecognised tokens are reported with their text"""
        assert parse_arguments(["--bogus"]) == UnknownArgument("--bogus")

    def test_bare_word_is_unknown(self):
        """Step names are not accepted as positional arguments"""
        assert parse_arguments(["migrate"]) == UnknownArgument("migrate")

    def test_first_problem_short_circuits(self):
        """Parsing stops at the first help or unknown token"""
        assert parse_arguments(["--bogus", "--help"]) == UnknownArgument("--bogus")
        assert parse_arguments(["-h", "--bogus"]) == ShowHelp()
