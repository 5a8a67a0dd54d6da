"""Tests for Column and RowGroup placement."""

import pytest

from gridsheet.engine.blocks import ContentKind
from gridsheet.engine.row_group import Column, RowGroup
from gridsheet.exceptions import LayoutError


def snapshot(group):
    return (
        group.height,
        [(column.width, column.height, list(column.blocks)) for column in group.columns],
        group.last_keyid_index,
    )


class TestColumn:
    """Test suite for Column."""

    def test_append_tracks_width_and_height(self, make_block):
        column = Column()
        column.append(make_block("a", text="ABCD"))
        column.append(make_block("b", text="AB"))

        assert column.width == 4
        assert column.height == 4

    def test_locate(self, make_block):
        first = make_block("a", text="AB")
        second = make_block("b", ContentKind.GRID10)
        column = Column()
        column.append(first)
        column.append(second)

        assert column.locate(0) == (first, 0)
        assert column.locate(1) == (first, 1)
        assert column.locate(3) == (second, 1)
        assert column.locate(10) == (second, 8)
        assert column.locate(11) is None

    def test_block_offsets(self, make_block):
        first = make_block("a", text="AB")
        second = make_block("b", ContentKind.GRID10)
        column = Column()
        column.append(first)
        column.append(second)

        assert column.block_offsets() == [(first, 0), (second, 2)]


class TestRowGroup:
    """Test suite for RowGroup.add."""

    def test_first_block_sets_height(self, make_block):
        group = RowGroup(80)

        assert group.add(make_block("a", text="X"))
        assert group.height == 2
        assert len(group.columns) == 1

    def test_taller_block_rebuilds_group(self, make_block):
        a = make_block("a", text="X")
        b = make_block("b", ContentKind.GRID10)
        group = RowGroup(80)

        assert group.add(a)
        assert group.add(b)

        assert group.height == 9
        assert [column.blocks for column in group.columns] == [[a], [b]]
        assert [column.height for column in group.columns] == [2, 9]
        assert [column.width for column in group.columns] == [1, 10]

    def test_blocks_stack_in_last_column_until_full(self, make_block):
        group = RowGroup(80)
        group.add(make_block("grid", ContentKind.GRID10))
        for index in range(4):
            assert group.add(make_block(f"z{index}", text="Z"))

        assert len(group.columns) == 2
        assert group.columns[1].height == 8

        assert group.add(make_block("z4", text="Z"))
        assert len(group.columns) == 3
        assert group.columns[2].height == 2

    def test_stacking_widens_column_within_table(self, make_block):
        group = RowGroup(14)
        group.add(make_block("grid", ContentKind.GRID10))
        group.add(make_block("ab", text="AB"))

        assert group.add(make_block("abcd", text="ABCD"))
        assert len(group.columns) == 2
        assert group.columns[1].width == 4
        assert group.width == 14

    def test_failed_add_leaves_group_untouched(self, make_block):
        group = RowGroup(14)
        group.add(make_block("grid", ContentKind.GRID10))
        group.add(make_block("ab", text="AB"))
        group.add(make_block("abcd", text="ABCD"))
        before = snapshot(group)

        assert not group.add(make_block("abcde", text="ABCDE"))
        assert snapshot(group) == before

    def test_height_growth_restacks_existing_blocks(self, make_block):
        wide = make_block("wide", text="X" * 15)
        narrow = make_block("narrow", text="Y" * 5)
        grid = make_block("grid", ContentKind.GRID10)
        group = RowGroup(30)
        group.add(wide)
        group.add(narrow)
        assert len(group.columns) == 2

        assert group.add(grid)

        assert group.height == 9
        assert [column.blocks for column in group.columns] == [[wide, narrow], [grid]]
        assert group.width == 25

    def test_failed_height_growth_is_all_or_nothing(self, make_block):
        group = RowGroup(20)
        group.add(make_block("wide", text="X" * 15))
        group.add(make_block("narrow", text="Y" * 5))
        before = snapshot(group)

        assert not group.add(make_block("grid", ContentKind.GRID10))
        assert snapshot(group) == before
        assert group.height == 2

    def test_group_never_exceeds_table_width(self, make_block):
        group = RowGroup(25)
        for index in range(6):
            group.add(make_block(f"b{index}", text="ABCDEFG"))

        assert group.width <= 25
        assert all(column.height <= group.height for column in group.columns)

    def test_last_keyid_index(self, make_block):
        group = RowGroup(80)
        group.add(make_block("name", text="ABC"))
        assert group.last_keyid_index is None

        group.add(make_block("keyid", ContentKind.KEYID))
        assert group.last_keyid_index == 1

        group.add(make_block("grid", ContentKind.GRID10))
        assert group.last_keyid_index == 1

    def test_blocks_in_placement_order(self, make_block):
        blocks = [
            make_block("grid", ContentKind.GRID10),
            make_block("a", text="A"),
            make_block("b", text="B"),
        ]
        group = RowGroup.pack(80, blocks)

        assert group.blocks == blocks
        assert group.block_count == 3

    def test_pack_returns_none_on_failure(self, make_block):
        blocks = [make_block("x", text="X" * 10), make_block("y", text="Y" * 10)]

        assert RowGroup.pack(10, blocks) is None

    def test_last_column_of_empty_group(self):
        group = RowGroup(10)

        assert group.is_empty
        with pytest.raises(LayoutError):
            group.last_column
