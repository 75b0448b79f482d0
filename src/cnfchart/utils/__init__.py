import cnfchart.utils._wordgen as wordgen
from cnfchart.utils._wordgen import random_word, palindrome_word, valid_words, invalid_words
from cnfchart.utils._measure import run_and_measure
