import unittest
from unittest import mock

from reqsig import EMPTY, JsonBody, TextBody
from reqsig.config import DEFAULT_BUCKET, DEFAULT_REGION, Credentials, SignerConfig
from reqsig.errors import MissingCredentials


class TestCredentials(unittest.TestCase):
    def test_secret_hidden_from_repr(self) -> None:
        creds = Credentials('AKIDEXAMPLE', 'super-secret', 'token-value')
        self.assertIn('AKIDEXAMPLE', repr(creds))
        self.assertNotIn('super-secret', repr(creds))
        self.assertNotIn('token-value', repr(creds))

    def test_require(self) -> None:
        creds = Credentials('AKIDEXAMPLE', 'secret')
        self.assertIs(creds.require(), creds)
        with self.assertRaises(MissingCredentials):
            Credentials('', 'secret').require()


class TestSignerConfig(unittest.TestCase):
    def test_fallbacks(self) -> None:
        config = SignerConfig()
        self.assertIsNone(config.credentials)
        self.assertEqual(config.region, DEFAULT_REGION)
        self.assertEqual(config.bucket, DEFAULT_BUCKET)
        self.assertFalse(config.regional_s3_hosts)

    def test_from_env(self) -> None:
        config = SignerConfig.from_env({
            'AWS_ACCESS_KEY_ID': 'AKIDENV',
            'AWS_SECRET_ACCESS_KEY': 'env-secret',
            'AWS_SESSION_TOKEN': 'env-token',
            'AWS_DEFAULT_REGION': 'eu-north-1',
            'AWS_DEFAULT_BUCKET': 'env-bucket',
        })
        self.assertEqual(config.credentials, Credentials('AKIDENV', 'env-secret', 'env-token'))
        self.assertEqual(config.region, 'eu-north-1')
        self.assertEqual(config.bucket, 'env-bucket')

    def test_from_env_partial_credentials(self) -> None:
        config = SignerConfig.from_env({'AWS_ACCESS_KEY_ID': 'AKIDENV'})
        self.assertIsNone(config.credentials)
        self.assertEqual(config.region, DEFAULT_REGION)

    def test_from_process_environment(self) -> None:
        with mock.patch.dict('os.environ', {'AWS_DEFAULT_REGION': 'sa-east-1'}, clear=True):
            self.assertEqual(SignerConfig.from_env().region, 'sa-east-1')

    def test_with_credentials_returns_copy(self) -> None:
        config = SignerConfig(region='eu-west-1')
        updated = config.with_credentials(Credentials('AKID', 'secret'))
        self.assertIsNone(config.credentials)
        self.assertEqual(updated.region, 'eu-west-1')
        self.assertEqual(updated.credentials.access_key_id, 'AKID')


class TestBody(unittest.TestCase):
    def test_render(self) -> None:
        self.assertEqual(EMPTY.render(), '')
        self.assertEqual(TextBody('héllo').render(), 'héllo')
        self.assertEqual(JsonBody({'a': [1, 2], 'b': None}).render(), '{"a":[1,2],"b":null}')
        self.assertEqual(JsonBody('text').render(), '"text"')


if __name__ == '__main__':
    unittest.main(verbosity=2)
