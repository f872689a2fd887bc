from pathlib import Path

import pytest

CUE = "{index}\n00:00:0{index},000 --> 00:00:0{next},000\n{text}\n\n"


def srt(*lines: str) -> str:
    return "".join(CUE.format(index=i + 1, next=i + 2, text=t) for i, t in enumerate(lines))


@pytest.fixture
def transcript_dir(tmp_path: Path) -> Path:
    """A Text folder with lessons out of order, one stray file and a non-srt file."""
    d = tmp_path / "Text"
    d.mkdir()
    (d / "C1 - L2 - A1.srt").write_text(srt("Second lesson."), encoding="utf-8")
    (d / "C1 - L1 - 2.5.srt").write_text(srt("First lesson,", "part   two."), encoding="utf-8")
    (d / "C2 - L1 - 1.srt").write_text(srt("Chapter two."), encoding="utf-8")
    (d / "bonus.srt").write_text(srt("Bonus material."), encoding="utf-8")
    (d / "readme.txt").write_text("not a transcript", encoding="utf-8")
    return d
