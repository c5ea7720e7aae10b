import pytest

from failfast.predicates import equals, is_vowel_initial, parse_predicate


class TestEquals:
    def test_matches_target_only(self):
        predicate = equals("D")
        assert predicate("D")
        assert not predicate("d")
        assert not predicate(None)

    def test_name_mentions_target(self):
        assert equals("D").__name__ == "equals('D')"


class TestIsVowelInitial:
    @pytest.mark.parametrize("value", ["Apple", "egg", "Umbrella", "o", "Idle"])
    def test_vowels(self, value):
        assert is_vowel_initial(value)

    @pytest.mark.parametrize("value", ["Banana", "", "1up", "yam", 42])
    def test_non_vowels(self, value):
        assert not is_vowel_initial(value)


class TestParsePredicate:
    def test_target(self):
        assert parse_predicate(target="B")("B")

    def test_vowels(self):
        assert parse_predicate(vowels=True) is is_vowel_initial

    def test_neither(self):
        with pytest.raises(ValueError, match="required"):
            parse_predicate()

    def test_both(self):
        with pytest.raises(ValueError, match="not both"):
            parse_predicate(target="B", vowels=True)
