import logging

from transcript_pdf_generator import main, parse_args


def test_defaults():
    args = parse_args([])
    assert args.input_dir == "Text"
    assert args.extension == ".srt"
    assert args.output_file == "combined_transcript.pdf"
    assert args.title == "Transcript of SRT Files"
    assert not args.summary


def test_generates_pdf(transcript_dir, tmp_path, caplog):
    caplog.set_level(logging.INFO)
    out = tmp_path / "combined.pdf"
    assert main(["--input_dir", str(transcript_dir), "--output_file", str(out)]) == 0
    assert out.read_bytes().startswith(b"%PDF")
    assert "Order of files to be processed:" in caplog.text
    assert "bonus.srt -> [Unmatched]" in caplog.text
    assert f"PDF generated: {out}" in caplog.text


def test_summary_skips_pdf(transcript_dir, tmp_path, caplog):
    caplog.set_level(logging.INFO)
    out = tmp_path / "combined.pdf"
    assert main(["--input_dir", str(transcript_dir), "--output_file", str(out), "--summary"]) == 0
    assert not out.exists()
    assert "C1 - L1 - 2.5.srt -> [C: 1, L: 1, Third: 2.5]" in caplog.text


def test_empty_directory_still_renders(tmp_path, caplog):
    caplog.set_level(logging.INFO)
    out = tmp_path / "combined.pdf"
    assert main(["--input_dir", str(tmp_path), "--output_file", str(out)]) == 0
    assert out.exists()
    assert "No files found in the directory or none matched the pattern." in caplog.text
    assert "Order of files to be processed:" not in caplog.text


def test_unreadable_file_exits_nonzero(transcript_dir, tmp_path, caplog):
    (transcript_dir / "C1 - L1 - 1.srt").write_bytes(b"\xff\xfe\xfa")
    out = tmp_path / "combined.pdf"
    assert main(["--input_dir", str(transcript_dir), "--output_file", str(out)]) == 1
    assert not out.exists()
    assert "collation aborted" in caplog.text
    assert "C1 - L1 - 1.srt" in caplog.text
