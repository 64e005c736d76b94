__version__ = "0.1.0"

from .window_types import *
from .pairs import validate_config, generate_pairs, count_pairs
from .memo import WindowMemo
from .sliding_window import sliding_window, WindowHandler
from .graphs import dependency_graph, is_generation_order_topological
from .problems import PalindromeTracker, longest_palindromic_substring, longest_palindrome, matrix_chain_order, matrix_chain_cost, merge_cost, minimum_merge_cost
