import unittest
import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from stack_diff.core.fingerprint import fingerprint, fnv1a_32, format_fingerprint


class TestFingerprint(unittest.TestCase):
    def test_fnv1a_reference_vectors(self):
        self.assertEqual(fnv1a_32(b""), 0x811C9DC5)
        self.assertEqual(fnv1a_32(b"a"), 0xE40C292C)
        self.assertEqual(fnv1a_32(b"foobar"), 0xBF9CF968)

    def test_fingerprint_hashes_utf8_bytes(self):
        self.assertEqual(fingerprint("foobar"), 0xBF9CF968)
        self.assertEqual(fingerprint("héllo"), fnv1a_32("héllo".encode("utf-8")))

    def test_fingerprint_is_32_bit(self):
        value = fingerprint("main.worker\n#\t0x6b4c1d\tmain.worker+0x3d")
        self.assertGreaterEqual(value, 0)
        self.assertLessEqual(value, 0xFFFFFFFF)

    def test_equal_bodies_equal_fingerprints(self):
        body = "0x43a1c5 0x46a561\n#\t0x46a560\truntime.goexit+0x0"
        self.assertEqual(fingerprint(body), fingerprint(str(body)))
        self.assertNotEqual(fingerprint("foo"), fingerprint("bar"))

    def test_format_fingerprint(self):
        self.assertEqual(format_fingerprint(0x1), "00000001")
        self.assertEqual(format_fingerprint(0xBF9CF968), "bf9cf968")


if __name__ == '__main__':
    unittest.main()
