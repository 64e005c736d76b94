from windowpairs.memo import *

import unittest

class TestWindowMemo(unittest.TestCase):

    def test_rows_on_demand(self):
        memo = WindowMemo()
        self.assertEqual(0, len(memo))
        memo[4, 3] = 'a'
        memo[4, 2] = 'b'
        memo[1, 0] = 'c'
        self.assertEqual('a', memo[4][3])
        self.assertEqual('b', memo[4, 2])
        self.assertEqual({3: 'a', 2: 'b'}, memo[4])
        self.assertEqual([4, 1], memo.rows())
        self.assertEqual(3, len(memo))
        self.assertEqual([(4, 3), (4, 2), (1, 0)], list(memo))

    def test_missing(self):
        memo = WindowMemo()
        memo[0, 1] = 1
        with self.assertRaises(KeyError):
            memo[2]
        with self.assertRaises(KeyError):
            memo[0][2]
        with self.assertRaises(KeyError):
            memo[0, 2]
        self.assertNotIn((0, 2), memo)
        self.assertIn((0, 1), memo)
        self.assertIsNone(memo.get((3, 3)))
        self.assertEqual(-1, memo.get((3, 3), -1))

    def test_overwrite(self):
        memo = WindowMemo()
        memo[0, 1] = 1
        memo[0, 1] = 2
        self.assertEqual(1, len(memo))
        self.assertEqual([((0, 1), 2)], list(memo.items()))

    def test_to_array(self):
        memo = WindowMemo()
        self.assertEqual((0, 0), memo.to_array().shape)
        memo[0, 0] = 0
        memo[1, 2] = (1, 2)
        arr = memo.to_array(fill_value = -1)
        self.assertEqual((3, 3), arr.shape)
        self.assertEqual(0, arr[0, 0])
        self.assertEqual((1, 2), arr[1, 2])
        self.assertEqual(-1, arr[2, 1])
        self.assertTrue(np.all(arr[2] == -1))

if __name__ == '__main__':
    unittest.main()
