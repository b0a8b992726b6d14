"""
Shared fixtures

Every test starts with styling enabled and the default style table, so
results don't depend on NO_COLOR or CLANSI_* in the environment. The root
values are restored afterwards.
"""

import pytest

from clansi.lib.codes import ansi_enabled, ansi_set
from clansi.lib.styles import DEFAULT_STYLES, styles_get, styles_set


@pytest.fixture(autouse=True)
def ansi_defaults():
    saved_flag = ansi_enabled()
    saved_styles = dict(styles_get())
    ansi_set(True)
    styles_set(DEFAULT_STYLES)
    yield
    ansi_set(saved_flag)
    styles_set(saved_styles)
