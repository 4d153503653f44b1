"""
Tests for formula primitives.

Tests cover:
- DegreeAlteration, FormulaDegree (degree.py)
- ScaleFormula (scale.py)
- ChordFormula (chord.py)
"""

import pytest

from chuk_mcp_theory.core import (
    ChordFormula,
    DegreeAlteration,
    DuplicateDegreeError,
    FormulaDegree,
    Note,
    NoteRangeError,
    PitchClass,
    ScaleFormula,
    Semitone,
)


class TestDegreeAlteration:
    """Tests for DegreeAlteration."""

    def test_offsets(self) -> None:
        """Alterations are semitone offsets."""
        assert DegreeAlteration.FLAT.semitone_offset() == Semitone(-1)
        assert DegreeAlteration.NATURAL.semitone_offset() == Semitone(0)
        assert DegreeAlteration.DOUBLE_SHARP.semitone_offset() == Semitone(2)

    def test_predicates(self) -> None:
        """Flat, sharp and natural checks."""
        assert DegreeAlteration.DOUBLE_FLAT.is_flat()
        assert DegreeAlteration.SHARP.is_sharp()
        assert DegreeAlteration.NATURAL.is_natural()
        assert DegreeAlteration.FLAT.opposite() == DegreeAlteration.SHARP

    def test_symbols(self) -> None:
        """Symbols parse and print."""
        assert str(DegreeAlteration.FLAT) == "b"
        assert str(DegreeAlteration.NATURAL) == ""
        assert DegreeAlteration.parse("##") == DegreeAlteration.DOUBLE_SHARP
        assert DegreeAlteration.parse("♭") == DegreeAlteration.FLAT
        assert DegreeAlteration.parse("") == DegreeAlteration.NATURAL

    def test_parse_invalid(self) -> None:
        """Unknown symbols raise ValueError."""
        with pytest.raises(ValueError):
            DegreeAlteration.parse("x")


class TestFormulaDegree:
    """Tests for FormulaDegree."""

    def test_resolution(self) -> None:
        """Degrees resolve against the major scale."""
        assert FormulaDegree.natural(1).to_semitone() == Semitone(0)
        assert FormulaDegree.natural(3).to_semitone() == Semitone(4)
        assert FormulaDegree.natural(5).to_semitone() == Semitone(7)
        assert FormulaDegree.flat(7).to_semitone() == Semitone(10)
        assert FormulaDegree.natural(8).to_semitone() == Semitone(12)
        assert FormulaDegree.natural(9).to_semitone() == Semitone(14)
        assert FormulaDegree.sharp(11).to_semitone() == Semitone(18)
        assert FormulaDegree.flat(13).to_semitone() == Semitone(20)
        assert FormulaDegree.double_flat(7).to_semitone() == Semitone(9)

    def test_flat_root_is_negative(self) -> None:
        """A flattened root sits below the root."""
        assert FormulaDegree.flat(1).to_semitone() == Semitone(-1)

    def test_degrees_past_thirteen(self) -> None:
        """Degree numbers are unbounded."""
        assert FormulaDegree.natural(15).to_semitone() == Semitone(24)
        assert FormulaDegree.natural(22).to_semitone() == Semitone(36)

    def test_invalid_number(self) -> None:
        """Degree numbers start at 1."""
        with pytest.raises(ValueError):
            FormulaDegree.natural(0)
        with pytest.raises(ValueError):
            FormulaDegree(-3)

    def test_int_alteration_coerced(self) -> None:
        """Plain ints are accepted for the alteration."""
        assert FormulaDegree(7, -1) == FormulaDegree.flat(7)
        assert FormulaDegree(7, -1).alteration is DegreeAlteration.FLAT

    def test_classification(self) -> None:
        """Chord tones, tensions and extended degrees."""
        assert FormulaDegree.natural(3).is_chord_tone()
        assert FormulaDegree.natural(9).is_tension()
        assert FormulaDegree.natural(9).is_extended()
        assert not FormulaDegree.natural(7).is_extended()
        assert FormulaDegree.natural(13).simple_number() == 6

    def test_chord_tone_uses_number(self) -> None:
        """Compound degrees are not chord tones even when they reduce to one."""
        assert FormulaDegree.natural(7).is_chord_tone()
        assert not FormulaDegree.natural(8).is_chord_tone()
        assert not FormulaDegree.natural(10).is_chord_tone()

    def test_str_and_parse(self) -> None:
        """Degree notation."""
        assert str(FormulaDegree.flat(7)) == "b7"
        assert str(FormulaDegree.sharp(11)) == "#11"
        assert str(FormulaDegree.natural(5)) == "5"
        assert FormulaDegree.parse("b9") == FormulaDegree.flat(9)
        assert FormulaDegree.parse("♯11") == FormulaDegree.sharp(11)
        assert FormulaDegree.parse("bb7") == FormulaDegree.double_flat(7)
        assert FormulaDegree.flat(7).describe() == "flat 7"

    def test_parse_invalid(self) -> None:
        """Malformed symbols raise ValueError."""
        with pytest.raises(ValueError):
            FormulaDegree.parse("b")
        with pytest.raises(ValueError):
            FormulaDegree.parse("x3")


class TestScaleFormula:
    """Tests for ScaleFormula."""

    def test_major_membership(self) -> None:
        """Major scale holds the major third but not the minor second."""
        major = ScaleFormula.major()
        assert major.contains_semitone(Semitone(4))
        assert not major.contains_semitone(Semitone(1))

    def test_membership_ignores_octave(self) -> None:
        """Membership is by pitch class."""
        major = ScaleFormula.MAJOR
        assert major.contains_semitone(16)
        assert major.contains_semitone(-8)

    def test_notes_from_root(self, middle_c: Note) -> None:
        """Project onto middle C."""
        notes = ScaleFormula.major().notes_from_root(middle_c)
        assert [n.value for n in notes] == [60, 62, 64, 65, 67, 69, 71]
        assert len(notes) == ScaleFormula.major().note_count()

    def test_notes_out_of_range(self) -> None:
        """Projection past the top of the range raises."""
        with pytest.raises(NoteRangeError):
            ScaleFormula.major().notes_from_root(Note(250))

    def test_offsets_deduplicated_and_sorted(self) -> None:
        """Construction order does not matter."""
        formula = ScaleFormula.from_semitones([7, 0, 4, 4, 0])
        assert formula.offsets == (0, 4, 7)
        assert formula == ScaleFormula.from_semitones([0, 4, 7])

    def test_negative_offset(self) -> None:
        """Offsets are measured upward from the root."""
        with pytest.raises(ValueError):
            ScaleFormula.from_semitones([0, -1])

    def test_str(self) -> None:
        """Degree notation."""
        assert str(ScaleFormula.BLUES) == "1-b3-4-b5-5-b7"
        assert str(ScaleFormula.from_semitones([0, 14])) == "1-9"
        assert str(ScaleFormula.empty()) == "∅"

    def test_repr(self) -> None:
        """Only presets print as class attributes."""
        assert repr(ScaleFormula.MAJOR) == "ScaleFormula.MAJOR"
        assert repr(ScaleFormula.empty()) == "ScaleFormula(())"
        assert repr(ScaleFormula.from_semitones([0, 7], name="foo")) == "ScaleFormula((0, 7))"
        assert repr(ScaleFormula.from_semitones([0, 7], name="major")) == "ScaleFormula((0, 7))"

    def test_degrees(self) -> None:
        """Offsets spell as degrees."""
        assert ScaleFormula.NATURAL_MINOR.degrees()[2] == FormulaDegree.flat(3)

    def test_set_operations(self) -> None:
        """Union, intersection, complement."""
        major = ScaleFormula.MAJOR
        minor = ScaleFormula.NATURAL_MINOR
        assert (major | minor).offsets == (0, 2, 3, 4, 5, 7, 8, 9, 10, 11)
        assert (major & minor).offsets == (0, 2, 5, 7)
        assert (~major).offsets == (1, 3, 6, 8, 10)
        assert major.union(~major) == ScaleFormula.chromatic()

    def test_empty(self) -> None:
        """The empty formula projects to nothing."""
        empty = ScaleFormula.empty()
        assert empty.is_empty()
        assert not empty.has_root()
        assert empty.notes_from_root(Note(60)) == ()
        assert len(empty) == 0

    def test_by_name(self) -> None:
        """Named lookup is forgiving about case and separators."""
        assert ScaleFormula.by_name("Natural Minor") == ScaleFormula.NATURAL_MINOR
        assert ScaleFormula.by_name("minor-pentatonic") == ScaleFormula.MINOR_PENTATONIC
        assert ScaleFormula.by_name("ionian") == ScaleFormula.MAJOR
        assert "dorian" in ScaleFormula.names()

    def test_by_name_unknown(self) -> None:
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError):
            ScaleFormula.by_name("hyperlydian")

    def test_pitch_classes(self) -> None:
        """Pitch classes from a root."""
        assert ScaleFormula.MAJOR_PENTATONIC.pitch_classes(PitchClass.G) == [
            PitchClass.G,
            PitchClass.A,
            PitchClass.B,
            PitchClass.D,
            PitchClass.E,
        ]

    def test_extended(self) -> None:
        """Offsets may run past the octave."""
        notes = ScaleFormula.MAJOR_EXTENDED.notes_from_root(Note(60))
        assert len(notes) == 14
        assert notes[-1] == Note(83)


class TestChordFormula:
    """Tests for ChordFormula."""

    def test_builder(self) -> None:
        """Incremental construction."""
        triad = (
            ChordFormula.new()
            .with_degree(FormulaDegree.natural(1))
            .with_degree(FormulaDegree.natural(3))
            .with_degree(FormulaDegree.natural(5))
        )
        assert [n.value for n in triad.notes_from_root(Note(60))] == [60, 64, 67]
        assert triad == ChordFormula.MAJOR_TRIAD

    def test_builder_is_immutable(self) -> None:
        """with_degree returns a new formula."""
        base = ChordFormula.new()
        extended = base.with_degree(1)
        assert base.is_empty()
        assert len(extended) == 1

    def test_dominant_seventh(self, middle_c: Note) -> None:
        """1-3-5-b7 from middle C."""
        notes = ChordFormula.DOMINANT_SEVENTH.notes_from_root(middle_c)
        assert [n.value for n in notes] == [60, 64, 67, 70]

    def test_insertion_order(self) -> None:
        """Notes follow insertion order, not pitch order."""
        formula = ChordFormula.of(FormulaDegree.natural(5), FormulaDegree.natural(1))
        assert [n.value for n in formula.notes_from_root(Note(60))] == [67, 60]

    def test_duplicate_degree(self) -> None:
        """The same degree and alteration may not appear twice."""
        formula = ChordFormula.new().with_degree(FormulaDegree.natural(3))
        with pytest.raises(DuplicateDegreeError):
            formula.with_degree(FormulaDegree.natural(3))
        with pytest.raises(ValueError):
            ChordFormula.parse("1-3-3")

    def test_int_degrees_coerced(self) -> None:
        """Plain ints build natural degrees."""
        formula = ChordFormula.of(1, 3, 5)
        assert formula == ChordFormula.MAJOR_TRIAD
        assert [n.value for n in formula.notes_from_root(Note(60))] == [60, 64, 67]
        assert ChordFormula((1, FormulaDegree.flat(7))).degrees[0] == FormulaDegree.natural(1)

    def test_int_duplicate_of_degree(self) -> None:
        """An int and the equal FormulaDegree count as the same degree."""
        with pytest.raises(DuplicateDegreeError):
            ChordFormula.of(1, FormulaDegree.natural(1))
        with pytest.raises(DuplicateDegreeError):
            ChordFormula.parse("1-1")

    def test_invalid_degree_type(self) -> None:
        """Only degrees and ints are accepted."""
        with pytest.raises(TypeError):
            ChordFormula.of("3")  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            ChordFormula.of(True)  # type: ignore[arg-type]
        with pytest.raises(ValueError):
            ChordFormula.of(0)

    def test_repr(self) -> None:
        """Only presets print as class attributes."""
        assert repr(ChordFormula.DOMINANT_SEVENTH) == "ChordFormula.DOMINANT_SEVENTH"
        assert repr(ChordFormula.of(1, 3, name="triad")) == "ChordFormula.parse('1-3')"

    def test_same_number_different_alteration(self) -> None:
        """b9 and #9 coexist."""
        formula = ChordFormula.parse("1-3-b7-b9-#9")
        assert formula.has_degree(9, DegreeAlteration.FLAT)
        assert formula.has_degree(FormulaDegree.sharp(9))
        assert not formula.has_degree(9)
        assert formula.has_any_degree(9)
        assert formula.alterations_of(9) == (DegreeAlteration.FLAT, DegreeAlteration.SHARP)

    def test_root_and_octave_kept(self) -> None:
        """1 and 8 land on the same pitch class but both are kept."""
        notes = ChordFormula.parse("1-3-5-8").notes_from_root(Note(48))
        assert [n.value for n in notes] == [48, 52, 55, 60]

    def test_parse_and_str(self) -> None:
        """Formula notation."""
        formula = ChordFormula.parse("1-b3-5-b7")
        assert formula == ChordFormula.MINOR_SEVENTH
        assert str(formula) == "1-b3-5-b7"
        assert ChordFormula.parse("1 b3, 5") == ChordFormula.MINOR_TRIAD
        assert ChordFormula.parse("") == ChordFormula.new()
        assert str(ChordFormula.new()) == "∅"

    def test_semitones(self) -> None:
        """Degrees resolve in insertion order."""
        assert ChordFormula.DIMINISHED_SEVENTH.semitones() == (
            Semitone(0),
            Semitone(3),
            Semitone(6),
            Semitone(9),
        )
        assert ChordFormula.DOMINANT_SEVENTH_SHARP_ELEVENTH.semitones()[-1] == Semitone(18)

    def test_by_name(self) -> None:
        """Named and symbol lookup."""
        assert ChordFormula.by_name("dominant seventh") == ChordFormula.DOMINANT_SEVENTH
        assert ChordFormula.by_name("Half-Diminished Seventh") == ChordFormula.HALF_DIMINISHED_SEVENTH
        assert ChordFormula.by_name("m7") == ChordFormula.MINOR_SEVENTH
        assert ChordFormula.by_name("M7") == ChordFormula.MAJOR_SEVENTH
        assert ChordFormula.by_name("7") == ChordFormula.DOMINANT_SEVENTH
        assert "major triad" in [n.replace("_", " ") for n in ChordFormula.names()]

    def test_by_name_unknown(self) -> None:
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError):
            ChordFormula.by_name("mystery chord")

    def test_union(self) -> None:
        """Union appends missing degrees."""
        combined = ChordFormula.MAJOR_TRIAD.union(ChordFormula.parse("1-b7-9"))
        assert str(combined) == "1-3-5-b7-9"

    def test_container_protocol(self) -> None:
        """Iteration, length and membership."""
        formula = ChordFormula.MAJOR_SEVENTH
        assert list(formula)[1] == FormulaDegree.natural(3)
        assert len(formula) == 4
        assert FormulaDegree.natural(7) in formula
        assert FormulaDegree.flat(7) not in formula

    def test_notes_out_of_range(self) -> None:
        """Projection past the top of the range raises."""
        with pytest.raises(NoteRangeError):
            ChordFormula.DOMINANT_THIRTEENTH.notes_from_root(Note(240))

    def test_flat_root_below_zero(self) -> None:
        """A flattened root cannot sit below note 0."""
        with pytest.raises(NoteRangeError):
            ChordFormula.parse("b1-3").notes_from_root(Note(0))
