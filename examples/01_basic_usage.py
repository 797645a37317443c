"""
Basic Usage Example for Mushaf

This example demonstrates the simplest way to use Mushaf:
1. Segment marked-up verse text
2. Fetch a surah from the upstream source
3. Assemble it into numbered verses
4. Check the verse count
"""

from mushaf.core import MarkerConvention, build_surah, check_verse_count, segment
from mushaf.models import Surah
from mushaf.sources import GhaziSource


def main():
    # Step 1: Segment text directly
    print("Step 1: Segmenting a short passage...")
    content = "الٓرۚ تِلۡكَ ءَايَٰتُ ٱلۡكِتَٰبِ ٱلۡحَكِيمِ ١ أَكَانَ لِلنَّاسِ عَجَبًا ٢"
    for verse in segment(content, MarkerConvention.END_OF_UNIT):
        print(f"  {verse.number}: {verse.text}")

    # Step 2: Fetch a surah
    surah = Surah.from_id(10)
    print(f"\nStep 2: Fetching {surah}...")
    with GhaziSource() as source:
        payload = source.fetch_surah(surah.source_slug)
    print(f"  Received {len(payload.fragments)} fragments")

    # Step 3: Assemble
    print("\nStep 3: Assembling verses...")
    surah_text = build_surah(payload, surah.id)
    print(f"  Bismillah: {surah_text.bismillah or '(none)'}")
    print(f"  Verses: {surah_text.verse_count}")

    # Step 4: Check quality
    print("\n" + "=" * 80)
    ok = check_verse_count(surah_text)
    print(f"Verse count {'matches' if ok else 'does not match'} ({surah.total_ayahs} expected)")


if __name__ == "__main__":
    main()
