import re

# Every table is loaded front to back and each entry is inserted at the head
# of its list: the last entry of a table is the first one checked.


def _suffix(pattern):
    return re.compile(pattern, re.IGNORECASE)


IRREGULAR_PAIRS = (
    ('child', 'children'),
    ('person', 'people'),
    ('man', 'men'),
    ('tooth', 'teeth'),
    ('foot', 'feet'),
    ('mouse', 'mice'),
    ('louse', 'lice'),
    ('goose', 'geese'),
    ('ox', 'oxen'),
    ('die', 'dice'),
    ('quiz', 'quizzes'),
    ('human', 'humans'),
    ('german', 'germans'),
    ('roman', 'romans'),
    ('shaman', 'shamans'),
    ('talisman', 'talismans'),
    ('ottoman', 'ottomans'),
    ('caiman', 'caimans'),
    ('axe', 'axes'),
    ('pickaxe', 'pickaxes'),
    ('eave', 'eaves'),
    ('carve', 'carves'),
    ('valve', 'valves'),
    ('groove', 'grooves'),
    ('proof', 'proofs'),
    ('thief', 'thieves'),
    ('canvas', 'canvases'),
    ('lens', 'lenses'),
    ('passerby', 'passersby'),
    ('yes', 'yeses'),
    ('looey', 'looies'),
    ('echo', 'echoes'),
    ('dingo', 'dingoes'),
    ('volcano', 'volcanoes'),
    ('tornado', 'tornadoes'),
    ('torpedo', 'torpedoes'),
    ('genus', 'genera'),
    ('viscus', 'viscera'),
    ('stigma', 'stigmata'),
    ('stoma', 'stomata'),
    ('dogma', 'dogmata'),
    ('lemma', 'lemmata'),
    ('schema', 'schemata'),
    ('anathema', 'anathemata'),
)

PLURAL_RULES = (
    (_suffix(r's?$'), 's'),
    (_suffix(r'(ax|test)is$'), '$1es'),
    (_suffix(r'(alias|[^aou]us|t[lm]as|gas|ris)$'), '$1es'),
    (_suffix(r'(e[mn]u)s?$'), '$1s'),
    (_suffix(r'(alumn|syllab|vir|radi|nucle|fung|cact|stimul|termin|bacill|foc|uter|loc|strat)(?:us|i)$'), '$1i'),
    (_suffix(r'(alumn|alg|vertebr)(?:a|ae)$'), '$1ae'),
    (_suffix(r'(seraph|cherub)(?:im)?$'), '$1im'),
    (_suffix(r'(her|at|gr)o$'), '$1oes'),
    (_suffix(r'(agend|addend|millenni|dat|extrem|bacteri|desiderat|strat|candelabr|errat|ov|symposi|curricul|automat|quor)(?:a|um)$'), '$1a'),
    (_suffix(r'(apheli|hyperbat|periheli|asyndet|noumen|phenomen|criteri|organ|prolegomen|hedr|automat)(?:a|on)$'), '$1a'),
    (_suffix(r'sis$'), 'ses'),
    (_suffix(r'(?:(kni|wi|li)fe|(ar|l|ea|eo|oa|hoo)f)$'), '$1$2ves'),
    (_suffix(r'([^aeiouy]|qu)y$'), '$1ies'),
    (_suffix(r'([^ch][ieo][ln])ey$'), '$1ies'),
    (_suffix(r'(x|ch|ss|sh|zz?)$'), '$1es'),
    (_suffix(r'(matr|cod|mur|sil|vert|ind|append)(?:ix|ex)$'), '$1ices'),
    (_suffix(r'\b((?:tit)?m|l)ouse$'), '$1ice'),
    (_suffix(r'(pe)rson$'), '$1ople'),
    (_suffix(r'(child)$'), '$1ren'),
    (_suffix(r'(eau)$'), '$1x'),
    (_suffix(r'm[ae]n$'), 'men'),
    # already plural: grandchildren, townspeople, bureaux, women
    (_suffix(r'(?:children|people|eaux|\b(?:wo)?men)$'), '$0'),
)

SINGULAR_RULES = (
    (_suffix(r'(.)s$'), '$1'),
    (_suffix(r'ies$'), 'y'),
    (_suffix(r'(dg|ss|ois|lk|ok|wn|mb|th|ch|ec|oal|is|ck|ix|sser|ts|wb)ies$'), '$1ie'),
    (_suffix(r'\b(l|(?:neck|cross|hog|aun)?t|coll|faer|food|gen|goon|group|hipp|junk|vegg|(?:pork)?p|charl|calor|cut)ies$'), '$1ie'),
    (_suffix(r'\b(mon|smil)ies$'), '$1ey'),
    (_suffix(r'(wi|kni|(?:after|half|high|low|mid|non|night|[^\w]|^)li)ves$'), '$1fe'),
    (_suffix(r'(ar|(?:wo|[ae])l|[eo][ao])ves$'), '$1f'),
    (_suffix(r'\b((?:tit)?m|l)ice$'), '$1ouse'),
    (_suffix(r'(seraph|cherub)im$'), '$1'),
    # words ending in s that are already singular: class, bus, alias, atlas, gas, iris
    (_suffix(r'(ss|alias|[^aou]us|t[lm]as|gas|[aeiou]ris)$'), '$0'),
    (_suffix(r'(x|ch|ss|sh|zz|tto|go|cho|alias|[^aou]us|t[lm]as|gas|(?:her|at|gr)o|[aeiou]ris)es$'), '$1'),
    (_suffix(r'(tz)es$'), '$1'),
    (_suffix(r'(analy|diagno|parenthe|progno|synop|the|empha|cri|ne)sis$'), '$0'),
    (_suffix(r'(analy|diagno|parenthe|progno|synop|the|empha|cri|ne)ses$'), '$1sis'),
    (_suffix(r'\b(?:ax|bas|oas|tenn|th)is$'), '$0'),
    (_suffix(r'(movie|twelve|abuse|e[mn]u)s$'), '$1'),
    (_suffix(r'(test)es$'), '$1is'),
    (_suffix(r'(alumn|syllab|vir|radi|nucle|fung|cact|stimul|termin|bacill|foc|uter|loc|strat)i$'), '$1us'),
    (_suffix(r'(agend|addend|millenni|dat|extrem|bacteri|desiderat|strat|candelabr|errat|ov|symposi|curricul|quor)a$'), '$1um'),
    (_suffix(r'(apheli|hyperbat|periheli|asyndet|noumen|phenomen|criteri|organ|prolegomen|hedr|automat)a$'), '$1on'),
    (_suffix(r'(alumn|alg|vertebr)ae$'), '$1a'),
    (_suffix(r'(cod|mur|sil|vert|ind)ices$'), '$1ex'),
    (_suffix(r'(matr|append)ices$'), '$1ix'),
    (_suffix(r'(pe)ople$'), '$1rson'),
    (_suffix(r'(child)ren$'), '$1'),
    (_suffix(r'(eau)x$'), '$1'),
    (_suffix(r'men$'), 'man'),
)

UNCOUNTABLES = (
    # literal words
    'adulthood', 'advice', 'agenda', 'aid', 'aircraft', 'alcohol', 'ammo', 'analytics', 'anime',
    'athletics', 'audio', 'bison', 'blood', 'bream', 'buffalo', 'butter', 'carp', 'cash', 'chassis',
    'chess', 'clothing', 'cod', 'commerce', 'cooperation', 'corps', 'debris', 'diabetes', 'digestion',
    'elk', 'energy', 'equipment', 'excretion', 'expertise', 'firmware', 'fish', 'flounder', 'fun',
    'gallows', 'garbage', 'graffiti', 'hardware', 'headquarters', 'health', 'herpes', 'highjinks',
    'homework', 'housework', 'information', 'jeans', 'justice', 'kudos', 'labour', 'literature',
    'machinery', 'mackerel', 'mail', 'manga', 'moose', 'mud', 'music', 'news', 'personnel', 'pike',
    'plankton', 'pliers', 'police', 'pollution', 'premises', 'rain', 'research', 'rice', 'salmon',
    'scissors', 'series', 'sewage', 'shambles', 'sheep', 'shrimp', 'software', 'species', 'staff',
    'swine', 'tennis', 'traffic', 'transportation', 'trout', 'tuna', 'wealth', 'welfare', 'whiting',
    'wildebeest', 'wildlife',
    # word families
    _suffix(r'pok[eé]mon$'),
    _suffix(r'[^aeiou]ese$'),
    _suffix(r'deer$'),
    _suffix(r'fish$'),
    _suffix(r'measles$'),
    _suffix(r'o[iu]s$'),
    _suffix(r'pox$'),
    _suffix(r'sheep$'),
    _suffix(r'[^\x00-\x7f]$'),
)


def load_rules(target, irregular_pairs=IRREGULAR_PAIRS, plural_rules=PLURAL_RULES,
               singular_rules=SINGULAR_RULES, uncountables=UNCOUNTABLES):
    """
    Populate ``target`` with irregular pairs, plural rules, singular rules and
    uncountable words, in this order.

    :param target: Any object with the ``add_*`` methods of ``Pluralizer``.
    :raises InvalidRuleError: If an entry is rejected by ``target``.

    Later entries take priority over earlier ones, and anything the caller
    adds after loading takes priority over all of them.
    """
    for singular, plural in irregular_pairs:
        target.add_irregular(singular, plural)
    for pattern, replacement in plural_rules:
        target.add_plural_rule(pattern, replacement)
    for pattern, replacement in singular_rules:
        target.add_singular_rule(pattern, replacement)
    for word in uncountables:
        target.add_uncountable(word)
