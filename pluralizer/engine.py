import numbers
from typing import Dict, List

from .dataset import load_rules
from .exceptions import EmptyInputError, InvalidCountError
from .rules import logger, apply_rule, PatternLike, Rule, RuleStore
from .string_utils import restore_case


class Transformer:
    def __init__(self, store: RuleStore, log_rules=False):
        self.store = store
        self.log_rules = log_rules

    def process_word(self, word: str, rules: List[Rule], irregulars: Dict[str, str], targets=None) -> str:
        """
        Transform ``word`` with ``rules`` and the ``irregulars`` lookup.

        :param word: The word to transform.
        :param rules: Rules in priority order.
        :param irregulars: Map from the source form to the target form.
        :param targets: Irregular words already in the target form, the values of
                        ``irregulars`` by default.
        :return: The transformed word, or ``word`` unchanged when nothing applies.

        Uncountable words are checked first, then irregular words, then the
        rules. A rule that matches without changing the word does not stop the
        scan, unless it is a keep rule.
        """
        lower_word = word.lower()

        if lower_word in self.store.uncountables:
            self._log_rule(word, word, 'uncountable')
            return word

        if lower_word in irregulars:
            result = restore_case(word, irregulars[lower_word])
            self._log_rule(word, result, 'irregular')
            return result

        # already in the target form, e.g. "children" when pluralizing
        if targets is None:
            targets = irregulars.values()
        if lower_word in targets:
            self._log_rule(word, word, 'irregular')
            return word

        for rule in rules:
            if not rule.pattern.search(word):
                continue
            if rule.keep:
                self._log_rule(word, word, 'rule', rule)
                return word
            result = apply_rule(word, rule)
            if result != word:
                self._log_rule(word, result, 'rule', rule)
                return result

        self._log_rule(word, word, 'unchanged')
        return word

    def _log_rule(self, word, result, source, rule=None):
        if not self.log_rules:
            return
        if rule is None:
            logger.info('%s -> %s (%s)', word, result, source)
        else:
            logger.info('%s -> %s (%s %s)', word, result, source, rule.pattern.pattern)


class Pluralizer:
    """
    Convert English nouns between singular and plural form.

    Rules added with ``add_plural_rule``, ``add_singular_rule`` and
    ``add_uncountable`` take priority over everything added before them, the
    bundled rules included.

    Reading from the same instance in several threads is safe as long as
    nobody adds rules at the same time.
    """
    def __init__(self, load_defaults=True, log_rules=False):
        self.rules = RuleStore()
        self.transformer = Transformer(self.rules, log_rules)
        if load_defaults:
            load_rules(self)

    @property
    def log_rules(self):
        return self.transformer.log_rules

    @log_rules.setter
    def log_rules(self, value):
        self.transformer.log_rules = value

    def plural(self, word: str) -> str:
        """
        Convert a word to its plural form.

        :param word: The word to pluralize.
        :return: The plural form, with the casing of ``word``.
        :raises EmptyInputError: If ``word`` is empty.
        """
        self._check_word(word)
        return self.transformer.process_word(word, self.rules.plural_rules,
                                             self.rules.irregular_plurals, self.rules.irregular_singulars)

    def singular(self, word: str) -> str:
        """
        Convert a word to its singular form.

        :param word: The word to singularize.
        :return: The singular form, with the casing of ``word``.
        :raises EmptyInputError: If ``word`` is empty.
        """
        self._check_word(word)
        return self.transformer.process_word(word, self.rules.singular_rules,
                                             self.rules.irregular_singulars, self.rules.irregular_plurals)

    def pluralize(self, word: str, count, inclusive=False) -> str:
        """
        Return the singular form of ``word`` when ``count`` is 1, the plural otherwise.

        :param word: The word to inflect.
        :param count: How many of them.
        :param inclusive: Whether to prefix the result with the count.
        :return: The inflected word, for example ``"cats"`` or ``"2 cats"``.
        :raises EmptyInputError: If ``word`` is empty.
        :raises InvalidCountError: If ``count`` is not a number.
        """
        self._check_word(word)
        if not isinstance(count, numbers.Number) or isinstance(count, bool):
            raise InvalidCountError(f'Count must be a number, got {count!r}')

        result = self.singular(word) if count == 1 else self.plural(word)
        return f'{count} {result}' if inclusive else result

    def is_plural(self, word: str) -> bool:
        return self.plural(word) == word

    def is_singular(self, word: str) -> bool:
        return self.singular(word) == word

    def add_plural_rule(self, pattern: PatternLike, replacement: str):
        self.rules.add_plural_rule(pattern, replacement)

    def add_singular_rule(self, pattern: PatternLike, replacement: str):
        self.rules.add_singular_rule(pattern, replacement)

    def add_irregular(self, singular: str, plural: str):
        self.rules.add_irregular(singular, plural)

    def add_uncountable(self, word: PatternLike):
        self.rules.add_uncountable(word)

    @staticmethod
    def _check_word(word):
        if not isinstance(word, str) or not word:
            raise EmptyInputError(f'Word must be a non-empty string, got {word!r}')


default_pluralizer = Pluralizer()
