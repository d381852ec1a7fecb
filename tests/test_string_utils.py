from pluralizer.string_utils import CaseClass, case_class, restore_case


def test_case_class():
    assert case_class('cat') == CaseClass.Lower
    assert case_class('person2') == CaseClass.Lower
    assert case_class('CAT') == CaseClass.Upper
    assert case_class('X') == CaseClass.Upper
    assert case_class('Cat') == CaseClass.Capitalized
    assert case_class('McDonald') == CaseClass.Capitalized
    assert case_class('iPhone') == CaseClass.Mixed


def test_restore_case():
    assert restore_case('cat', 'CATS') == 'cats'
    assert restore_case('CAT', 'cats') == 'CATS'
    assert restore_case('Cat', 'cATS') == 'Cats'
    assert restore_case('Person', 'people') == 'People'
    assert restore_case('PERSON', 'people') == 'PEOPLE'
    assert restore_case('iPhone', 'IPHONES') == 'iphones'


def test_restore_case_keeps_case_class():
    for original in ('child', 'CHILD', 'Child'):
        assert case_class(restore_case(original, 'children')) == case_class(original)
    for original in ('knife', 'KNIFE', 'Knife'):
        assert case_class(restore_case(original, 'KnIvEs')) == case_class(original)


def test_restore_case_empty_transformed():
    assert restore_case('Cat', '') == 'Cat'
    assert restore_case('s', '') == 's'
