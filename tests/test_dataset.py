import re

import pytest

from pluralizer.dataset import IRREGULAR_PAIRS, PLURAL_RULES, SINGULAR_RULES, UNCOUNTABLES, load_rules
from pluralizer.engine import Pluralizer, default_pluralizer
from pluralizer.exceptions import InvalidRuleError


class RecordingTarget:
    def __init__(self):
        self.calls = []

    def add_irregular(self, singular, plural):
        self.calls.append('irregular')

    def add_plural_rule(self, pattern, replacement):
        self.calls.append('plural')

    def add_singular_rule(self, pattern, replacement):
        self.calls.append('singular')

    def add_uncountable(self, word):
        self.calls.append('uncountable')


def test_load_order():
    target = RecordingTarget()
    load_rules(target)
    assert target.calls == (['irregular'] * len(IRREGULAR_PAIRS)
                            + ['plural'] * len(PLURAL_RULES)
                            + ['singular'] * len(SINGULAR_RULES)
                            + ['uncountable'] * len(UNCOUNTABLES))


def test_last_entry_is_checked_first():
    pluralizer = Pluralizer()
    uncountable_patterns = [word for word in UNCOUNTABLES if isinstance(word, re.Pattern)]

    # uncountable patterns are loaded last, so they come before all the rules
    assert pluralizer.rules.plural_rules[0].pattern is uncountable_patterns[-1]
    assert pluralizer.rules.singular_rules[0].pattern is uncountable_patterns[-1]
    assert pluralizer.rules.plural_rules[-1].pattern is PLURAL_RULES[0][0]
    assert pluralizer.rules.singular_rules[-1].pattern is SINGULAR_RULES[0][0]
    assert len(pluralizer.rules.plural_rules) == len(PLURAL_RULES) + len(uncountable_patterns)
    assert len(pluralizer.rules.singular_rules) == len(SINGULAR_RULES) + len(uncountable_patterns)


def test_irregular_pairs():
    for singular, plural in IRREGULAR_PAIRS:
        assert default_pluralizer.plural(singular) == plural
        assert default_pluralizer.singular(plural) == singular
        assert default_pluralizer.plural(singular.capitalize()) == plural.capitalize()
        assert default_pluralizer.plural(singular.upper()) == plural.upper()
        assert default_pluralizer.singular(plural.upper()) == singular.upper()


def test_plural_forms_are_unique():
    plurals = [plural for singular, plural in IRREGULAR_PAIRS]
    assert len(plurals) == len(set(plurals))


def test_literal_uncountables():
    for word in UNCOUNTABLES:
        if isinstance(word, str):
            assert default_pluralizer.plural(word) == word
            assert default_pluralizer.singular(word) == word
            assert default_pluralizer.plural(word.capitalize()) == word.capitalize()


def test_uncountable_families():
    for word in ('goldfish', 'Chinese', 'reindeer', 'smallpox', 'measles', 'pokémon', 'café'):
        assert default_pluralizer.plural(word) == word
        assert default_pluralizer.singular(word) == word


def test_load_rules_custom_tables():
    pluralizer = Pluralizer(load_defaults=False)
    load_rules(pluralizer,
               irregular_pairs=[('die', 'dice')],
               plural_rules=[(re.compile(r'$'), 's')],
               singular_rules=[(re.compile(r'(.)s$'), '$1')],
               uncountables=['rice'])
    assert pluralizer.plural('die') == 'dice'
    assert pluralizer.singular('dice') == 'die'
    assert pluralizer.plural('dog') == 'dogs'
    assert pluralizer.singular('dogs') == 'dog'
    assert pluralizer.plural('rice') == 'rice'
    assert pluralizer.plural('child') == 'childs'


def test_load_rules_rejects_bad_entries():
    with pytest.raises(InvalidRuleError):
        load_rules(Pluralizer(load_defaults=False), plural_rules=[('(', 'x')])


def test_words_ending_in_man_that_take_s():
    for singular, plural in (('German', 'Germans'), ('Roman', 'Romans'), ('talisman', 'talismans'),
                             ('human', 'humans')):
        assert default_pluralizer.plural(singular) == plural
        assert default_pluralizer.singular(plural) == singular

    assert default_pluralizer.plural('woman') == 'women'
    assert default_pluralizer.plural('fireman') == 'firemen'


def test_words_ending_in_z():
    assert default_pluralizer.plural('waltz') == 'waltzes'
    assert default_pluralizer.plural('Buzz') == 'Buzzes'
    assert default_pluralizer.singular('waltzes') == 'waltz'
    assert default_pluralizer.singular('buzzes') == 'buzz'
    assert default_pluralizer.singular('sizes') == 'size'


def test_lens():
    assert default_pluralizer.singular('lens') == 'lens'
    assert default_pluralizer.plural('lens') == 'lenses'
    assert default_pluralizer.singular('lenses') == 'lens'
