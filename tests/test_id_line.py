"""Tests for the ID line decoder."""

import pytest

from uniprot_lines.error_handler import LineSyntaxError
from uniprot_lines.id_line import entry_name, entry_status, id_line, sequence_length
from uniprot_lines.models import EntryStatus, IdLine


class TestEntryName:
    """Test cases for entry name recognition."""

    def test_valid_names(self):
        """Test typical entry names."""
        assert entry_name("CYC_BOVIN") == ("", "CYC_BOVIN")
        assert entry_name("GIA2_GIALA") == ("", "GIA2_GIALA")
        assert entry_name("Q5JU06_HUMAN   Unreviewed;") == ("   Unreviewed;", "Q5JU06_HUMAN")

    def test_longest_parts(self):
        """Test ten-character mnemonic and five-character species code."""
        assert entry_name("A0A022YWF9_MIMGU") == ("", "A0A022YWF9_MIMGU")

    @pytest.mark.parametrize("text", [
        "CYC",
        "CYC__",
        "CYC__BOVIN",
        "_BOVIN",
        "cyc_BOVIN",
        "ABCDEFGHIJK_HUMAN",
    ])
    def test_rejects(self, text):
        """Test malformed entry names."""
        with pytest.raises(LineSyntaxError):
            entry_name(text)

    def test_species_code_stops_at_five(self):
        """Test that a sixth species character is left unconsumed."""
        assert entry_name("CYC_BOVINE") == ("E", "CYC_BOVIN")


class TestEntryStatus:
    """Test cases for entry status recognition."""

    def test_reviewed(self):
        """Test the Reviewed literal."""
        assert entry_status("Reviewed") == ("", EntryStatus.REVIEWED)

    def test_unreviewed(self):
        """Test the Unreviewed literal."""
        assert entry_status("Unreviewed;") == (";", EntryStatus.UNREVIEWED)

    @pytest.mark.parametrize("text", ["UnReviewed", "viewed", "reviewed", "REVIEWED", ""])
    def test_rejects(self, text):
        """Test that only exact literals are accepted."""
        with pytest.raises(LineSyntaxError):
            entry_status(text)

    def test_enum_values(self):
        """Test the enum maps to the flat-file text."""
        assert EntryStatus("Reviewed") is EntryStatus.REVIEWED
        assert EntryStatus("Unreviewed") is EntryStatus.UNREVIEWED
        assert len(EntryStatus) == 2


class TestSequenceLength:
    """Test cases for sequence length recognition."""

    def test_length(self):
        """Test a length with its unit."""
        assert sequence_length("104 AA") == ("", 104)
        assert sequence_length("35213   AA.") == (".", 35213)

    def test_largest_length(self):
        """Test the largest unsigned 64-bit length."""
        assert sequence_length("18446744073709551615 AA") == ("", 2 ** 64 - 1)

    def test_leading_zeros(self):
        """Test that leading zeros do not count towards the limit."""
        assert sequence_length("0" * 30 + "104 AA") == ("", 104)

    @pytest.mark.parametrize("text", [
        "104AA",
        "104 B",
        "AA",
        "-104 AA",
        "1,004 AA",
        "18446744073709551616 AA",
        "100000000000000000000 AA",
        "9" * 5000 + " AA",
    ])
    def test_rejects(self, text):
        """Test malformed lengths."""
        with pytest.raises(LineSyntaxError):
            sequence_length(text)

    def test_oversized_length_fails_id_line(self):
        """Test that a length beyond 64 bits fails the whole ID line."""
        with pytest.raises(LineSyntaxError):
            id_line("ID   CYC_BOVIN   Reviewed;   18446744073709551616 AA.\n")
        with pytest.raises(LineSyntaxError):
            id_line("ID   CYC_BOVIN   Reviewed;   " + "1" * 5000 + " AA.\n")


class TestIdLine:
    """Test cases for ID line decoding."""

    @pytest.mark.parametrize("text,expected", [
        (
            "ID   CYC_BOVIN               Reviewed;         104 AA.\n",
            IdLine(name="CYC_BOVIN", status=EntryStatus.REVIEWED, length=104),
        ),
        (
            "ID   GIA2_GIALA              Reviewed;         296 AA.\n",
            IdLine(name="GIA2_GIALA", status=EntryStatus.REVIEWED, length=296),
        ),
        (
            "ID   Q5JU06_HUMAN            Unreviewed;       268 AA.\n",
            IdLine(name="Q5JU06_HUMAN", status=EntryStatus.UNREVIEWED, length=268),
        ),
    ])
    def test_id_line(self, text, expected):
        """Test decoding of real ID lines."""
        assert id_line(text) == ("", expected)

    def test_remainder(self):
        """Test that only the ID line is consumed."""
        rest, line = id_line("ID   CYC_BOVIN   Reviewed;   104 AA.\nAC   P62894;\n")

        assert line.name == "CYC_BOVIN"
        assert rest == "AC   P62894;\n"

        with pytest.raises(LineSyntaxError):
            id_line(rest)

    def test_name_parts(self):
        """Test the mnemonic and species code helpers."""
        _, line = id_line("ID   CYC_BOVIN               Reviewed;         104 AA.\n")

        assert line.mnemonic == "CYC"
        assert line.species_code == "BOVIN"
        assert line.is_reviewed

    def test_immutable(self):
        """Test that decoded lines cannot be modified."""
        _, line = id_line("ID   CYC_BOVIN               Reviewed;         104 AA.\n")

        with pytest.raises(AttributeError):
            line.length = 105

    @pytest.mark.parametrize("text", [
        "ID   CYC_BOVIN               UnReviewed;         104 AA.\n",
        "ID   CYC_BOVIN               Reviewed;         104AA.\n",
        "ID   CYC_BOVIN               Reviewed;         104 B.\n",
        "ID   CYC_BOVIN               Reviewed         104 AA.\n",
        "ID   CYC_BOVIN               Reviewed;         104 AA\n",
        "ID   CYC_BOVIN               Reviewed;         104 AA.",
        "ID   CYC_BOVIN               Reviewed;         abc AA.\n",
        "ID   CYC-BOVIN               Reviewed;         104 AA.\n",
        "ID   CYC_BOVINE              Reviewed;         104 AA.\n",
        "ID   CYC_BOVIN Reviewed;104 AA.\n",
        "IDCYC_BOVIN               Reviewed;         104 AA.\n",
        "AC   P62894;\n",
    ])
    def test_rejects(self, text):
        """Test that any deviation fails the whole line."""
        with pytest.raises(LineSyntaxError):
            id_line(text)
