import unittest
from unittest import mock

import requests

from packcheck.models import ERROR, OK, ValidationReport
from packcheck.urls import URL_SAMPLE_SIZE, URL_TIMEOUT, check_urls, sample_mods

from .pack_fixtures import make_manifest


def first_k(mods, k):
    return list(mods)[:k]


class TestSampleMods(unittest.TestCase):
    def test_samples_without_replacement(self):
        mods = [make_manifest(f"mod{i}") for i in range(10)]
        sample = sample_mods(mods, 3)
        self.assertEqual(len(sample), 3)
        self.assertEqual(len({m.name for m in sample}), 3)

    def test_fewer_than_k_samples_all(self):
        mods = [make_manifest("a"), make_manifest("b")]
        self.assertEqual(sorted(m.name for m in sample_mods(mods, 3)), ["a.pw.toml", "b.pw.toml"])

    def test_empty(self):
        self.assertEqual(sample_mods([], 3), [])


class TestCheckUrls(unittest.TestCase):
    def setUp(self):
        self.mods = [make_manifest(f"mod{i}", url=f"https://cdn.example.com/mod{i}.jar") for i in range(5)]
        self.session = mock.Mock()

    def test_only_sampled_mods_are_requested(self):
        self.session.head.return_value = mock.Mock(status_code=200)
        report = check_urls(self.mods, ValidationReport(), sampler=first_k, session=self.session)

        self.assertEqual(self.session.head.call_count, URL_SAMPLE_SIZE)
        self.session.head.assert_any_call("https://cdn.example.com/mod0.jar", timeout=URL_TIMEOUT, allow_redirects=True)
        self.assertEqual(report.count(OK), 3)
        self.assertFalse(report.has_errors)

    def test_bad_status_is_an_error(self):
        self.session.head.side_effect = [
            mock.Mock(status_code=200),
            mock.Mock(status_code=404),
            mock.Mock(status_code=204),
        ]
        report = check_urls(self.mods, ValidationReport(), sampler=first_k, session=self.session)

        errors = report.texts(ERROR)
        self.assertEqual(len(errors), 1)
        self.assertIn("mod1.pw.toml", errors[0])
        self.assertIn("404", errors[0])
        self.assertEqual(report.count(OK), 2)

    def test_network_failure_does_not_stop_other_requests(self):
        self.session.head.side_effect = [
            requests.exceptions.Timeout("timed out"),
            mock.Mock(status_code=200),
            requests.exceptions.ConnectionError("refused"),
        ]
        report = check_urls(self.mods, ValidationReport(), sampler=first_k, session=self.session)

        self.assertEqual(self.session.head.call_count, 3)
        self.assertEqual(report.count(ERROR), 2)
        self.assertIn("https://cdn.example.com/mod0.jar", report.texts(ERROR)[0])

    def test_manifest_without_url_is_skipped(self):
        mods = [make_manifest("curse-only"), self.mods[0]]
        self.session.head.return_value = mock.Mock(status_code=200)
        report = check_urls(mods, ValidationReport(), sampler=first_k, session=self.session)

        self.session.head.assert_called_once()
        self.assertEqual(len(report.messages), 1)


if __name__ == "__main__":
    unittest.main()
