from common.schemas import RawFragment
from transcript_processor.segmenter import segment_transcript


def _frag(text, start, end, confidence=0.9):
    return RawFragment(text=text, start_time=start, end_time=end, confidence=confidence)


class TestSegmentTranscript:
    def test_breaks_at_long_pause(self):
        fragments = [
            _frag("First topic here.", 0, 3000),
            _frag("Still on first topic.", 6000, 8000),
            _frag("Now a new topic.", 14000, 15000),
        ]
        result = segment_transcript(fragments, 5000)
        assert len(result) == 2
        assert result[0].text == "First topic here. Still on first topic."
        assert result[0].start_time == 0
        assert result[0].end_time == 8000
        assert result[1].text == "Now a new topic."

    def test_merges_short_fragments(self):
        fragments = [
            _frag("The", 0, 200),
            _frag("quick", 250, 500),
            _frag("brown fox", 550, 1000),
        ]
        result = segment_transcript(fragments)
        assert len(result) == 1
        assert result[0].text == "The quick brown fox"

    def test_confidence_is_minimum(self):
        fragments = [
            _frag("High confidence.", 0, 1000, 0.95),
            _frag("Lower confidence.", 1100, 2000, 0.7),
            _frag("Middle confidence.", 2100, 3000, 0.8),
        ]
        result = segment_transcript(fragments)
        assert result[0].confidence == 0.7

    def test_gap_equal_to_threshold_splits(self):
        fragments = [_frag("One.", 0, 1000), _frag("Two.", 6000, 7000)]
        assert len(segment_transcript(fragments, 5000)) == 2

    def test_skips_blank_fragments(self):
        fragments = [_frag("  ", 0, 100), _frag(" Kept ", 100, 200), _frag("", 200, 300)]
        result = segment_transcript(fragments)
        assert [p.text for p in result] == ["Kept"]
        assert result[0].start_time == 100

    def test_keeps_input_order(self):
        fragments = [_frag("B", 10000, 11000), _frag("A", 0, 1000)]
        result = segment_transcript(fragments, 5000)
        assert [p.text for p in result] == ["B A"]

    def test_empty_input(self):
        assert segment_transcript([]) == []

    def test_single_fragment(self):
        result = segment_transcript([_frag("Only one segment.", 0, 2000, 0.85)])
        assert len(result) == 1
        assert result[0].text == "Only one segment."
        assert result[0].confidence == 0.85
