"""
模式选择与分段单元测试
"""

from ptipaste.config import BusinessSpec
from ptipaste.extraction import segment_delimited, segment_freeform, select_mode
from ptipaste.models import RecordType


class TestSelectMode:
    """模式选择测试"""

    def test_tab_is_delimited(self):
        """测试含Tab一律走Tab模式"""
        assert select_mode("a\tb", RecordType.SPECIAL).delimited
        assert select_mode("a\tb", RecordType.STANDARD).delimited

    def test_special_without_tab(self):
        """测试SPECIAL无Tab走自由文本"""
        decision = select_mode("SNKO123456789012 42PC X 3", RecordType.SPECIAL)
        assert not decision.delimited
        assert decision.mode_name == "freeform"

    def test_standard_without_tab(self):
        """测试STANDARD无Tab仍走Tab模式"""
        assert select_mode("plain text", RecordType.STANDARD).delimited
        assert select_mode(None, "STANDARD").delimited


class TestSegmentDelimited:
    """Tab分段测试"""

    def test_drop_short_lines(self):
        """测试少于2列的行丢弃"""
        items = segment_delimited("a\tb\nsingle\n\nc\t d ")
        assert [item.cells for item in items] == [["a", "b"], ["c", "d"]]
        assert [item.index for item in items] == [1, 2]

    def test_line_breaks(self):
        """测试三种换行符"""
        assert len(segment_delimited("a\tb\r\nc\td\re\tf")) == 3

    def test_header_stripping(self, spec: BusinessSpec):
        """测试首行表头丢弃"""
        text = "BOOKING\tCNTR\tSIZE\nHASLK12345678901\tMSCU1234567\t40RF"
        items = segment_delimited(text, spec.get_header_markers(), spec.get_header_check_columns())
        assert len(items) == 1
        assert items[0].cells[0] == "HASLK12345678901"

    def test_header_in_booking_column(self, spec: BusinessSpec):
        """测试full布局表头（订舱号列含BKG）"""
        text = "선사\t위치\t고객\tBKG NO\tCNTR\nHAL\tSNCT\tX\tHASLK12345678901\tMSCU1234567"
        items = segment_delimited(text, spec.get_header_markers(), spec.get_header_check_columns())
        assert len(items) == 1
        assert items[0].cells[0] == "HAL"

    def test_header_only_first_row(self, spec: BusinessSpec):
        """测试只检查首个保留行"""
        text = "HASLK12345678901\tA\nLINE\tB"
        items = segment_delimited(text, spec.get_header_markers(), spec.get_header_check_columns())
        assert len(items) == 2


class TestSegmentFreeform:
    """自由文本分段测试"""

    def test_enumerators(self):
        """测试三种序号写法"""
        items = segment_freeform("1. foo\n2) bar\n3 baz")
        assert [item.text for item in items] == ["foo", "bar", "baz"]
        assert [item.index for item in items] == [1, 2, 3]

    def test_no_enumerator(self):
        """测试无序号时整体为一个条目"""
        items = segment_freeform("SNKO123456789012 42PC X 3")
        assert len(items) == 1
        assert items[0].text == "SNKO123456789012 42PC X 3"

    def test_blank_items_discarded(self):
        """测试空条目丢弃"""
        items = segment_freeform("1.\n2. foo\n3)   ")
        assert [item.text for item in items] == ["foo"]
        assert items[0].index == 1

    def test_preamble_merged(self):
        """测试首个序号前的内容并入第一个条目"""
        items = segment_freeform("오늘 요청\n1. foo\n2. bar")
        assert len(items) == 2
        assert items[0].text.startswith("오늘 요청")
        assert items[0].text.endswith("foo")

    def test_empty(self):
        """测试空文本"""
        assert segment_freeform("") == []
        assert segment_freeform(None) == []
