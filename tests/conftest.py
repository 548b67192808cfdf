import sys
import os

# Add the tests directory so test modules can import the shared sample tables
tests_dir = os.path.dirname(os.path.abspath(__file__))
if tests_dir not in sys.path:
    sys.path.insert(0, tests_dir)
