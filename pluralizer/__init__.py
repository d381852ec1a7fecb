from .exceptions import PluralizerError, EmptyInputError, InvalidCountError, InvalidRuleError
from .engine import Pluralizer, Transformer, default_pluralizer
from .rules import Rule, RuleStore
from .dataset import load_rules
