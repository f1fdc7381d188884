from leadforms.options import COMPANY_INDUSTRIES, COMPANY_TYPES, STATES, find_option, titles


def test_states_cover_all_states_and_dc():
    assert len(STATES) == 51
    assert len({option.value for option in STATES}) == 51
    assert find_option(STATES, "DE").title == "Delaware"


def test_find_option_matches_value_or_title():
    assert find_option(COMPANY_TYPES, "c corporation").value == "c-corporation"
    assert find_option(COMPANY_INDUSTRIES, "b2c-saas").title == "B2C SaaS"
    assert find_option(COMPANY_INDUSTRIES, "Unknown") is None
    assert find_option(COMPANY_INDUSTRIES, None) is None


def test_titles_keep_order():
    assert titles(COMPANY_TYPES)[0] == "C Corporation"


def test_company_select_index_resolution():
    from leadforms.company.ui_sections import _resolve_option_index

    assert _resolve_option_index(STATES, "Delaware") == 7
    assert _resolve_option_index(COMPANY_TYPES, None) is None
