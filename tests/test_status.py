"""Test the expiring message bar text."""

import unittest

from rezvan.status import StatusMessage


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


class TestStatusMessage(unittest.TestCase):

    def setUp(self):
        self.clock = FakeClock()

    def test_initial_message_is_shown(self):
        status = StatusMessage("HELP", timeout=5, clock=self.clock)
        self.assertEqual(status.message(), "HELP")

    def test_no_message_by_default(self):
        status = StatusMessage(clock=self.clock)
        self.assertIsNone(status.message())

    def test_message_expires_after_timeout(self):
        status = StatusMessage(timeout=5, clock=self.clock)
        status.set_message("Saved")
        self.clock.now += 5
        self.assertEqual(status.message(), "Saved")
        self.clock.now += 0.5
        self.assertIsNone(status.message())
        # Stays gone once expired
        self.clock.now -= 1
        self.assertIsNone(status.message())

    def test_setting_a_message_restarts_the_timer(self):
        status = StatusMessage("old", timeout=5, clock=self.clock)
        self.clock.now += 4
        status.set_message("new")
        self.clock.now += 4
        self.assertEqual(status.message(), "new")

    def test_clear(self):
        status = StatusMessage("text", clock=self.clock)
        status.clear()
        self.assertIsNone(status.message())


if __name__ == '__main__':
    unittest.main()
