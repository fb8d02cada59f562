"""
Command-line skills

- position: SunSwap V3 positions (add, remove, init-price)
- liquidity: SunSwap V2 pairs (add, remove)
- price: token prices from the Sun open API

Each prints a JSON result on stdout and progress logs on stderr.
"""
