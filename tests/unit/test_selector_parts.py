from selectorkit.models import PRECEDENCE, SelectorCategory, SelectorParts


def test_precedence_order():
    assert [category.value for category in PRECEDENCE] == [
        'element',
        'id',
        'class',
        'attribute',
        'pseudo_class',
        'pseudo_element',
    ]


def test_empty_parts_have_nothing_present():
    parts = SelectorParts()

    assert not any(parts.is_present(category) for category in PRECEDENCE)
    assert parts.fragments() == []


def test_is_present_for_single_and_list_slots():
    parts = SelectorParts(id='#main', classes=['.a'])

    assert parts.is_present(SelectorCategory.ID)
    assert parts.is_present(SelectorCategory.CLASS)
    assert not parts.is_present(SelectorCategory.ELEMENT)
    assert not parts.is_present(SelectorCategory.ATTRIBUTE)


def test_empty_string_counts_as_present():
    parts = SelectorParts(element='')

    assert parts.is_present(SelectorCategory.ELEMENT)


def test_present_after():
    parts = SelectorParts(element='a', attributes=['[href]'], pseudo_element='::after')

    assert parts.present_after(SelectorCategory.ID) == [SelectorCategory.ATTRIBUTE, SelectorCategory.PSEUDO_ELEMENT]
    assert parts.present_after(SelectorCategory.PSEUDO_CLASS) == [SelectorCategory.PSEUDO_ELEMENT]
    assert parts.present_after(SelectorCategory.PSEUDO_ELEMENT) == []


def test_fragments_follow_category_order():
    parts = SelectorParts(
        pseudo_element='::before',
        classes=['.x', '.y'],
        element='div',
        pseudo_classes=[':hover'],
    )

    assert parts.fragments() == ['div', '.x', '.y', ':hover', '::before']
