import random

from algonotes.sequences import max_subarray_sum, stock_span


def _brute_max(values):
    best = 0
    for i in range(len(values)):
        for j in range(i + 1, len(values) + 1):
            best = max(best, sum(values[i:j]))
    return best


def test_kadane_example():
    assert max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


def test_kadane_all_negative_is_zero():
    assert max_subarray_sum([-3, -1, -7]) == 0
    assert max_subarray_sum([]) == 0


def test_kadane_matches_bruteforce():
    rng = random.Random(7)
    for _ in range(100):
        values = [rng.randint(-20, 20) for _ in range(rng.randint(0, 15))]
        assert max_subarray_sum(values) == _brute_max(values)


def test_stock_span_example():
    assert stock_span([100, 80, 60, 70, 60, 75, 85]) == [1, 1, 1, 2, 1, 4, 6]


def test_stock_span_rising_prices_empty_stack():
    prices = [1, 2, 3, 4]
    assert stock_span(prices) == [day + 1 for day in range(len(prices))]


def test_stock_span_empty():
    assert stock_span([]) == []


def test_stock_span_definition():
    rng = random.Random(11)
    prices = [rng.randint(0, 10) for _ in range(50)]
    for day, span in enumerate(stock_span(prices)):
        window = prices[day - span + 1 : day + 1]
        assert all(p <= prices[day] for p in window)
        if day - span >= 0:
            assert prices[day - span] >= prices[day]