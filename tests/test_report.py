import pytest

from jsreader.findings import Category, Finding
from jsreader.report import LOG_HEADER, Reporter, plain_entry

S3 = Finding(Category.S3_BUCKET, "https://b.s3.amazonaws.com/x", "app.js",
             "Potential public S3 bucket - check permissions")


def test_console_block_layout(reporter):
    reporter.finding(S3)
    assert reporter.text.splitlines() == [
        "[S3 Bucket] https://b.s3.amazonaws.com/x",
        "   Details: Potential public S3 bucket - check permissions",
        "   Source: app.js",
        "",
    ]


def test_block_without_details_or_source(reporter):
    reporter.finding(Finding(Category.GRAPHQL, "https://x.example.com/graphql"))
    assert reporter.text == "[GraphQL] https://x.example.com/graphql\n\n"


def test_status_and_error_lines(reporter):
    reporter.status("Using 4 threads")
    reporter.error("https://x.example.com/a.js", "unexpected status code: 404")
    assert reporter.text.splitlines() == [
        "[STATUS] Using 4 threads",
        "[ERROR] https://x.example.com/a.js - unexpected status code: 404",
    ]


def test_quiet_hides_status_only(make_reporter):
    r = make_reporter(quiet=True)
    r.status("hidden")
    r.error("a.js", "boom")
    assert r.text == "[ERROR] a.js - boom\n"


def test_plain_entry():
    assert plain_entry(S3) == (
        "[S3 Bucket] https://b.s3.amazonaws.com/x\n"
        "Details: Potential public S3 bucket - check permissions\n"
        "Source: app.js\n\n"
    )


def test_results_file_mirror(tmp_path, make_reporter):
    out = tmp_path / "results.txt"
    out.write_text("stale")
    with make_reporter(output_file=out) as r:
        r.finding(S3)
        r.status("not mirrored")
    assert out.read_text() == LOG_HEADER + plain_entry(S3)
    assert "\x1b[" not in out.read_text()


def test_open_fails_for_missing_directory(tmp_path):
    r = Reporter(output_file=tmp_path / "nope" / "out.txt")
    with pytest.raises(OSError):
        r.open()


class BrokenWriter:
    def write(self, entry):
        raise OSError("No space left on device")

    def flush(self):
        pass

    def close(self):
        pass


def test_results_file_write_failure_is_reported(tmp_path, make_reporter):
    r = make_reporter(output_file=tmp_path / "results.txt").open()
    r._fh.close()
    r._fh = BrokenWriter()
    r.finding(S3)
    r.close()
    assert r.errors == [("Output", "Failed to write to output file: No space left on device")]
    lines = r.text.splitlines()
    assert lines[:4] == [
        "[S3 Bucket] https://b.s3.amazonaws.com/x",
        "   Details: Potential public S3 bucket - check permissions",
        "   Source: app.js",
        "",
    ]
    assert [line for line in lines if line.startswith("[ERROR]")] == [
        "[ERROR] Output - Failed to write to output file: No space left on device"
    ]
