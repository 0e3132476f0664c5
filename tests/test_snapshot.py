import unittest
import sys
import os
import tempfile
from pathlib import Path

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from stack_diff.core.errors import ConfigError, DumpReadError, ParseError
from stack_diff.core.fingerprint import fingerprint
from stack_diff.core.loader import load_snapshot, read_dump
from stack_diff.core.snapshot import Snapshot, StackRecord

from dump_samples import LEFT_DUMP, WORKER_BODY, POOL_BODY, TICKER_BODY, HTTP_BODY


def constant_hasher(body):
    """Every body collides."""
    return 0


class TestSnapshotConstruction(unittest.TestCase):
    def test_threshold_is_strict(self):
        snapshot = Snapshot.from_records([(12, "foo"), (10, "edge"), (3, "bar")], over=10)
        self.assertEqual(len(snapshot), 1)
        self.assertIn(StackRecord(12, "foo"), snapshot)
        self.assertNotIn(StackRecord(10, "edge"), snapshot)
        self.assertEqual(snapshot.raw_record_count, 3)

    def test_records_carry_body_fingerprint(self):
        snapshot = Snapshot.from_records([(12, "foo"), (11, "")], over=10)
        by_body = {record.body: record for record in snapshot}
        self.assertEqual(by_body["foo"].fingerprint, fingerprint("foo"))
        # Empty bodies are kept and fingerprinted too
        self.assertEqual(by_body[""].fingerprint, 0x811C9DC5)

    def test_same_body_later_record_wins(self):
        snapshot = Snapshot.from_records([(12, "foo"), (20, "foo")], over=10)
        self.assertEqual(len(snapshot), 1)
        self.assertEqual(snapshot.lookup(StackRecord(0, "foo")).count, 20)

    def test_colliding_bodies_are_chained(self):
        snapshot = Snapshot.from_records([(12, "foo"), (15, "bar")], over=10,
                                         hasher=constant_hasher)
        self.assertEqual(len(snapshot), 2)
        self.assertEqual(snapshot.lookup(StackRecord(0, "foo")).count, 12)
        self.assertEqual(snapshot.lookup(StackRecord(0, "bar")).count, 15)
        self.assertIsNone(snapshot.lookup(StackRecord(0, "baz")))

    def test_buckets_returns_a_copy(self):
        snapshot = Snapshot.from_records([(12, "foo")], over=10)
        buckets = snapshot.buckets()
        buckets.clear()
        self.assertEqual(len(snapshot), 1)

    def test_from_text(self):
        snapshot = Snapshot.from_text(LEFT_DUMP, over=10, source="left.txt")
        self.assertEqual(snapshot.source, "left.txt")
        self.assertEqual(snapshot.raw_record_count, 4)
        self.assertEqual({record.body for record in snapshot},
                         {WORKER_BODY, POOL_BODY, TICKER_BODY})
        self.assertNotIn(StackRecord(7, HTTP_BODY), snapshot)

    def test_from_text_logs_piece_count(self):
        with self.assertLogs("stack_diff.core.snapshot", level="INFO") as logs:
            Snapshot.from_text("12 @ foo\n\n\n\n3 @ bar\n\n", over=10, source="left.txt")
        self.assertEqual(len(logs.output), 1)
        self.assertIn("left.txt 4 pieces: 2 records parsed, 1 kept with count > 10", logs.output[0])

    def test_from_text_propagates_parse_errors(self):
        with self.assertRaises(ParseError):
            Snapshot.from_text("12 @ ok\n\nbad @ record", over=0)

    def test_raising_threshold_never_keeps_more_records(self):
        previous = None
        for over in range(-1, 130):
            kept = len(Snapshot.from_text(LEFT_DUMP, over=over))
            if previous is not None:
                self.assertLessEqual(kept, previous, f"over={over}")
            previous = kept
        self.assertEqual(previous, 0)


class TestLoader(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def test_load_snapshot(self):
        path = self.dir / "left.txt"
        path.write_text(LEFT_DUMP, encoding="utf-8")
        snapshot = load_snapshot(str(path), over=10)
        self.assertEqual(len(snapshot), 3)
        self.assertEqual(snapshot.source, str(path))

    def test_missing_path_is_config_error(self):
        with self.assertRaises(ConfigError):
            read_dump("")
        with self.assertRaises(ConfigError):
            read_dump(None)

    def test_unreadable_file(self):
        missing = self.dir / "nope.txt"
        with self.assertRaises(DumpReadError) as ctx:
            read_dump(str(missing))
        self.assertEqual(ctx.exception.path, str(missing))
        self.assertIn("couldn't read file", str(ctx.exception))

    def test_invalid_utf8(self):
        path = self.dir / "binary.txt"
        path.write_bytes(b"12 @ \xff\xfe")
        with self.assertRaises(DumpReadError):
            read_dump(str(path))

    def test_directory_is_not_readable(self):
        with self.assertRaises(DumpReadError):
            read_dump(str(self.dir))


if __name__ == '__main__':
    unittest.main()
