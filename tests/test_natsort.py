"""
Natural sort tests
"""

from mdhtml.lib.natsort import names_sortNatural


class TestNaturalSort:
    """Test natural ordering of file names"""

    def test_numeric_runs(self):
        """Digit runs compare by value"""
        assert names_sortNatural(["a2.md", "a10.md", "a1.md"]) == ["a1.md", "a2.md", "a10.md"]

    def test_multiple_runs(self):
        """Each digit run is compared independently"""
        names = ["v1.10.md", "v1.9.md", "v1.2.md"]
        assert names_sortNatural(names) == ["v1.2.md", "v1.9.md", "v1.10.md"]

    def test_case_insensitive_text(self):
        """Text runs ignore ASCII case"""
        assert names_sortNatural(["Beta.md", "alpha.md"]) == ["alpha.md", "Beta.md"]

    def test_leading_zeros_tie_break(self):
        """Equal numbers order by fewer leading zeros first"""
        assert names_sortNatural(["a001.md", "a1.md", "a01.md"]) == ["a1.md", "a01.md", "a001.md"]

    def test_prefix_sorts_first(self):
        """A name that is a prefix of another sorts first"""
        assert names_sortNatural(["intro2.md", "intro.md"]) == ["intro.md", "intro2.md"]

    def test_stable_total_order(self):
        """Names differing only in case still have a fixed order"""
        assert names_sortNatural(["a.md", "A.md"]) == names_sortNatural(["A.md", "a.md"])
