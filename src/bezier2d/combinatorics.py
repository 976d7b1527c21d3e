def binomial(n: int, k: int) -> int:
    """C(n, k) by product-then-divide accumulation; 0 when k > n."""
    if n < 0 or k < 0:
        raise ValueError("binomial requires non-negative n and k.")
    if k > n:
        return 0

    res = 1
    for i in range(k):
        res = res * (n - i) // (i + 1)
    return res
