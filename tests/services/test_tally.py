from availability.models import SelectedOption
from availability.services.ranking import tally_preferences


def test_tally_counts_each_preference_per_option():
    selections = [
        SelectedOption("a", 2),
        SelectedOption("a", 2),
        SelectedOption("a", -1),
        SelectedOption("b", 0, uncertain=True),
    ]

    assert tally_preferences(selections) == {"a": {2: 2, -1: 1}, "b": {0: 1}}


def test_tally_leaves_unselected_options_absent():
    tallies = tally_preferences([SelectedOption("a", 1)], option_ids={"a", "b"})

    assert "b" not in tallies


def test_tally_ignores_selections_for_unknown_options():
    selections = [SelectedOption("a", 1), SelectedOption("ghost", 4)]

    assert tally_preferences(selections, option_ids={"a"}) == {"a": {1: 1}}


def test_tally_keeps_values_outside_the_scale():
    assert tally_preferences([SelectedOption("a", 9)]) == {"a": {9: 1}}
