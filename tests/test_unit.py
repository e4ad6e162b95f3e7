"""Tests for the Unit sentinel."""

import copy

from sumkit import UNIT, Unit, try_run


class TestUnit:
    """Tests for UNIT."""

    def test_single_member(self):
        assert list(Unit) == [UNIT]
        assert Unit.UNIT is UNIT

    def test_repr(self):
        assert repr(UNIT) == 'UNIT'

    def test_copy_preserves_identity(self):
        assert copy.copy(UNIT) is UNIT
        assert copy.deepcopy(UNIT) is UNIT

    def test_try_run_yields_unit(self):
        assert try_run(lambda: None).value is UNIT
