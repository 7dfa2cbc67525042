import unittest

from reqsig.hashing import bytes_to_hex, hmac_sha256, hmac_sha256_hex, sha256_hex


class TestHashing(unittest.TestCase):
    def test_every_byte_is_two_lowercase_chars(self) -> None:
        for value in range(256):
            encoded = bytes_to_hex([value])
            self.assertEqual(len(encoded), 2)
            self.assertEqual(encoded, encoded.lower())
            self.assertEqual(int(encoded, 16), value)

    def test_known_bytes(self) -> None:
        self.assertEqual(bytes_to_hex([10]), '0a')
        self.assertEqual(bytes_to_hex([255]), 'ff')
        self.assertEqual(bytes_to_hex(b'\x00\x01\xab'), '0001ab')

    def test_signed_bytes_are_normalized(self) -> None:
        self.assertEqual(bytes_to_hex([-1]), 'ff')
        self.assertEqual(bytes_to_hex([-128, -16]), '80f0')

    def test_out_of_range_rejected(self) -> None:
        with self.assertRaises(ValueError):
            bytes_to_hex([256])
        with self.assertRaises(ValueError):
            bytes_to_hex([-129])

    def test_sha256(self) -> None:
        self.assertEqual(sha256_hex(''), 'e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855')
        self.assertEqual(sha256_hex('abc'), sha256_hex(b'abc'))
        self.assertEqual(sha256_hex('abc'), 'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad')

    def test_hmac_rfc4231_case_2(self) -> None:
        expected = '5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843'
        raw = hmac_sha256('what do ya want for nothing?', 'Jefe')
        self.assertIsInstance(raw, bytes)
        self.assertEqual(len(raw), 32)
        self.assertEqual(raw.hex(), expected)
        self.assertEqual(hmac_sha256_hex('what do ya want for nothing?', b'Jefe'), expected)


if __name__ == '__main__':
    unittest.main(verbosity=2)
