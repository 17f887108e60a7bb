import unittest

from earpitch.theory.errors import InvalidScaleType
from earpitch.theory.notes import Note, NoteWithOctave, parse_note
from earpitch.theory.scale import Scale
from earpitch.theory.scales import ScaleType, parse_scale_type


def _names(notes):
    return [str(n) for n in notes]


class ScaleTypeTests(unittest.TestCase):
    def test_parsing(self) -> None:
        self.assertIs(parse_scale_type("major"), ScaleType.MAJOR)
        self.assertIs(parse_scale_type("maj"), ScaleType.MAJOR)
        self.assertIs(parse_scale_type("minor"), ScaleType.MINOR)
        self.assertIs(ScaleType.parse("min"), ScaleType.MINOR)

    def test_parsing_is_exact(self) -> None:
        for text in ["invalid", "Major", "MAJ", "Min", " major", "major ", ""]:
            with self.subTest(text=text):
                with self.assertRaises(InvalidScaleType):
                    parse_scale_type(text)

    def test_intervals(self) -> None:
        self.assertEqual(ScaleType.MAJOR.intervals, (0, 2, 4, 5, 7, 9, 11))
        self.assertEqual(ScaleType.MINOR.intervals, (0, 2, 3, 5, 7, 8, 10))

    def test_interval_tables_are_well_formed(self) -> None:
        for scale_type in ScaleType:
            intervals = scale_type.intervals
            with self.subTest(scale_type=scale_type):
                self.assertEqual(len(intervals), 7)
                self.assertEqual(intervals[0], 0)
                self.assertLessEqual(intervals[-1], 11)
                self.assertTrue(all(a < b for a, b in zip(intervals, intervals[1:])))

    def test_display(self) -> None:
        self.assertEqual(str(ScaleType.MAJOR), "Major")
        self.assertEqual(str(ScaleType.MINOR), "Minor")


class ScaleTests(unittest.TestCase):
    def test_c_major(self) -> None:
        scale = Scale(NoteWithOctave(Note.C, 4), ScaleType.MAJOR)
        self.assertEqual(_names(scale.notes()), ["C4", "D4", "E4", "F4", "G4", "A4", "B4"])

    def test_a_minor_rolls_over_at_c(self) -> None:
        scale = Scale(parse_note("A4"), ScaleType.MINOR)
        self.assertEqual(_names(scale.notes()), ["A4", "B4", "C5", "D5", "E5", "F5", "G5"])

    def test_b_major_rolls_over_after_root(self) -> None:
        scale = Scale(parse_note("B3"), ScaleType.MAJOR)
        self.assertEqual(_names(scale.notes()), ["B3", "C#4", "D#4", "E4", "F#4", "G#4", "A#4"])

    def test_f_sharp_major_from_flat_root(self) -> None:
        scale = Scale(parse_note("Gb4"), ScaleType.MAJOR)
        self.assertEqual(_names(scale.notes()), ["F#4", "G#4", "A#4", "B4", "C#5", "D#5", "F5"])

    def test_root_first_and_length(self) -> None:
        for note in Note:
            for scale_type in ScaleType:
                root = NoteWithOctave(note, 3)
                notes = Scale(root, scale_type).notes()
                with self.subTest(root=root, scale_type=scale_type):
                    self.assertEqual(len(notes), 7)
                    self.assertEqual(notes[0], root)
                    freqs = [n.frequency() for n in notes]
                    self.assertEqual(freqs, sorted(freqs))

    def test_notes_returns_fresh_list(self) -> None:
        scale = Scale(parse_note("C4"), ScaleType.MAJOR)
        first = scale.notes()
        first.clear()
        self.assertEqual(len(scale.notes()), 7)

    def test_degree(self) -> None:
        scale = Scale(parse_note("A4"), ScaleType.MINOR)
        self.assertEqual(scale.degree(1), parse_note("A4"))
        self.assertEqual(scale.degree(3), parse_note("C5"))
        self.assertEqual(scale.degree(7), parse_note("G5"))
        with self.assertRaises(ValueError):
            scale.degree(0)
        with self.assertRaises(ValueError):
            scale.degree(8)

    def test_frequencies(self) -> None:
        freqs = Scale(parse_note("C4"), ScaleType.MAJOR).frequencies()
        self.assertEqual(len(freqs), 7)
        self.assertAlmostEqual(freqs[0], 261.63, delta=0.01)
        self.assertAlmostEqual(freqs[5], 440.0, delta=0.01)

    def test_transpose(self) -> None:
        scale = Scale(parse_note("C4"), ScaleType.MAJOR).transpose(parse_note("D3"))
        self.assertEqual(str(scale), "D3 Major")
        self.assertEqual(_names(scale.notes())[2], "F#3")

    def test_display(self) -> None:
        self.assertEqual(str(Scale(NoteWithOctave(Note.A, 4), ScaleType.MINOR)), "A4 Minor")


if __name__ == "__main__":
    unittest.main()
