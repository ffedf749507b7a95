from futurechain import CancellationToken
import unittest


class CancellationTokenTest(unittest.TestCase):
    def test_cancel_once(self):
        token = CancellationToken()
        self.assertFalse(token.is_cancelled)

        self.assertTrue(token.cancel())
        self.assertTrue(token.is_cancelled)

        self.assertFalse(token.cancel())
        self.assertTrue(token.is_cancelled)

    def test_listeners_called_once(self):
        token = CancellationToken()
        calls = []

        token.add_listener(lambda: calls.append(1))
        token.add_listener(lambda: calls.append(2))
        self.assertEqual([], calls)

        token.cancel()
        token.cancel()
        self.assertEqual([1, 2], calls)

    def test_listener_added_after_cancel_called_immediately(self):
        token = CancellationToken()
        token.cancel()

        calls = []
        token.add_listener(lambda: calls.append(True))
        self.assertEqual([True], calls)

    def test_remove_listener(self):
        token = CancellationToken()
        calls = []

        def listener():
            calls.append(True)

        token.add_listener(listener)
        token.add_listener(listener)
        self.assertEqual(2, token.remove_listener(listener))
        self.assertEqual(0, token.remove_listener(listener))

        token.cancel()
        self.assertEqual([], calls)

    def test_listener_can_query_token(self):
        token = CancellationToken()
        seen = []
        token.add_listener(lambda: seen.append(token.is_cancelled))

        token.cancel()
        self.assertEqual([True], seen)

    def test_repr(self):
        token = CancellationToken()
        self.assertEqual('CancellationToken<ACTIVE>', repr(token))
        token.cancel()
        self.assertEqual('CancellationToken<CANCELLED>', repr(token))


if __name__ == '__main__':
    unittest.main()
