import logging
import re
from typing import Dict, List, NamedTuple, Optional, Set, Union

from .exceptions import InvalidRuleError
from .string_utils import restore_case

logger = logging.getLogger('Pluralizer')

PatternLike = Union[str, re.Pattern]

TEMPLATE_TOKEN = re.compile(r'\$(\d)(\d?)')
KEEP_TEMPLATE = '$0'


class Rule(NamedTuple):
    pattern: re.Pattern
    replacement: str

    @property
    def keep(self):
        """A rule with the ``$0`` template stops the scan and leaves the word alone."""
        return self.replacement == KEEP_TEMPLATE

    def __repr__(self):
        return f'Rule({self.pattern.pattern!r} -> {self.replacement!r})'


def to_pattern(pattern: PatternLike) -> re.Pattern:
    """
    Convert a rule pattern to a compiled regular expression.

    :param pattern: A string or an already compiled pattern.
    :return: The compiled pattern.
    :raises InvalidRuleError: If the pattern is missing or does not compile.

    A string is anchored to the whole word and matched case-insensitively,
    a compiled pattern is used as it is, with its own flags.
    """
    if isinstance(pattern, re.Pattern):
        return pattern

    if not isinstance(pattern, str) or not pattern:
        raise InvalidRuleError(f'Rule pattern must be a non-empty string or a compiled pattern, got {pattern!r}')

    try:
        return re.compile(f'^(?:{pattern})$', re.IGNORECASE)
    except re.error as e:
        raise InvalidRuleError(f'Invalid rule pattern "{pattern}": {e}') from e


def expand_template(template: str, match: re.Match) -> str:
    """
    Replace every ``$N`` in ``template`` with group ``N`` of ``match``.

    Two digits are read as one group number only when the pattern has that
    many groups, otherwise the second digit is literal: ``$12`` is group 1
    followed by ``2`` in a pattern with fewer than 12 groups.
    """
    def replace_token(token):
        digits = token.group(1) + token.group(2)
        if int(digits) > match.re.groups:
            digits = token.group(1)
        tail = token.group(0)[1 + len(digits):]

        index = int(digits)
        if index > match.re.groups:
            return tail
        return (match.group(index) or '') + tail

    return TEMPLATE_TOKEN.sub(replace_token, template)


def apply_rule(word: str, rule: Rule) -> str:
    """
    Replace the first match of ``rule`` in ``word``.

    The replaced piece takes the casing of the text it replaces. A zero-width
    match borrows the casing of the character before it.
    """
    def replace_match(match):
        expanded = expand_template(rule.replacement, match)
        if not expanded:
            return match.group(0)

        if match.group(0):
            reference = match.group(0)
        elif match.start():
            reference = word[match.start() - 1]
        else:
            reference = word
        return restore_case(reference, expanded)

    return rule.pattern.sub(replace_match, word, count=1)


class RuleStore:
    """
    Ordered rule lists, irregular pairs and uncountable words.

    Rules are inserted at the front of their list, so the most recently added
    rule is checked first.
    """
    def __init__(self):
        self.plural_rules: List[Rule] = []
        self.singular_rules: List[Rule] = []
        self.irregular_plurals: Dict[str, str] = {}
        self.uncountables: Set[str] = set()
        self._irregular_singulars: Optional[Dict[str, str]] = None

    @property
    def irregular_singulars(self) -> Dict[str, str]:
        """Plural -> singular map, rebuilt after every change to the irregular pairs."""
        singulars = self._irregular_singulars
        if singulars is None:
            singulars = {plural: singular for singular, plural in self.irregular_plurals.items()}
            self._irregular_singulars = singulars
        return singulars

    def add_plural_rule(self, pattern: PatternLike, replacement: str):
        self.plural_rules.insert(0, self._make_rule(pattern, replacement))

    def add_singular_rule(self, pattern: PatternLike, replacement: str):
        self.singular_rules.insert(0, self._make_rule(pattern, replacement))

    def add_irregular(self, singular: str, plural: str):
        if not isinstance(singular, str) or not singular or not isinstance(plural, str) or not plural:
            raise InvalidRuleError(f'Irregular pair must be two non-empty strings, got {singular!r} and {plural!r}')

        singular = singular.lower()
        plural = plural.lower()

        other = self.irregular_singulars.get(plural)
        if other is not None and other != singular:
            logger.warning('Irregular plural "%s" is shared by "%s" and "%s", singular lookups will return "%s"',
                           plural, other, singular, singular)

        # re-inserting moves the pair to the end, so the latest registration
        # wins when the inverse map is rebuilt
        self.irregular_plurals.pop(singular, None)
        self.irregular_plurals[singular] = plural
        self._irregular_singulars = None

    def add_uncountable(self, word: PatternLike):
        """
        Mark a word as uncountable.

        A string goes into the uncountable set, which is checked before
        anything else. A compiled pattern becomes a keep rule in both
        directions and competes with the other rules by position.
        """
        if isinstance(word, re.Pattern):
            rule = self._make_rule(word, KEEP_TEMPLATE)
            self.plural_rules.insert(0, rule)
            self.singular_rules.insert(0, rule)
            return

        if not isinstance(word, str) or not word:
            raise InvalidRuleError(f'Uncountable word must be a non-empty string or a compiled pattern, got {word!r}')

        self.uncountables.add(word.lower())

    @staticmethod
    def _make_rule(pattern: PatternLike, replacement: str) -> Rule:
        if not isinstance(replacement, str) or not replacement:
            raise InvalidRuleError(f'Rule replacement must be a non-empty string, got {replacement!r}')
        return Rule(to_pattern(pattern), replacement)
