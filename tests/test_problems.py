from windowpairs.problems import *

import unittest

class TestPalindromes(unittest.TestCase):

    def test1_longest_palindromic_substring(self):
        result = longest_palindromic_substring('zytxxty')
        self.assertEqual('ytxxty', result[0][6].longest)
        self.assertEqual(None, result[0][6].current)
        self.assertEqual('ytxxty', result[1][6].longest)
        self.assertEqual('ytxxty', result[1][6].current)

        result = longest_palindromic_substring('zytxty')
        self.assertEqual('ytxty', result[0][5].longest)
        self.assertEqual(None, result[0][5].current)
        self.assertEqual('ytxty', result[1][5].longest)
        self.assertEqual('ytxty', result[1][5].current)

        result = longest_palindromic_substring('aab')
        self.assertEqual('aa', result[0][2].longest)
        self.assertEqual(None, result[0][2].current)
        self.assertEqual('aa', result[0][1].longest)

    def test2_longest_palindrome(self):
        self.assertEqual('aa', longest_palindrome('aab'))
        self.assertEqual('racecar', longest_palindrome('xracecary'))
        self.assertEqual('', longest_palindrome(''))
        self.assertEqual('q', longest_palindrome('q'))
        self.assertEqual('a', longest_palindrome('ab'))

class TestMatrixChain(unittest.TestCase):

    def test_textbook_chain(self):
        dimensions = [30, 35, 15, 5, 10, 20, 25]
        memo = matrix_chain_order(dimensions)
        self.assertEqual(15125, matrix_chain_cost(dimensions))
        self.assertEqual(15750, memo[0][1])
        self.assertEqual(0, memo[3][3])

    def test_two_matrices(self):
        self.assertEqual(6, matrix_chain_cost([1, 2, 3]))

    def test_degenerate(self):
        with self.assertRaises(ValueError):
            matrix_chain_order([10, 20])

class TestMergeCost(unittest.TestCase):

    def test_merge(self):
        memo = merge_cost([1, 2, 3])
        self.assertEqual(3, memo[0][1])
        self.assertEqual(5, memo[1][2])
        self.assertEqual(9, minimum_merge_cost([1, 2, 3]))
        self.assertEqual(17, minimum_merge_cost([3, 4, 3]))
        self.assertEqual(18, minimum_merge_cost([4, 1, 1, 4]))

    def test_degenerate(self):
        with self.assertRaises(ValueError):
            merge_cost([5])

if __name__ == '__main__':
    unittest.main()
