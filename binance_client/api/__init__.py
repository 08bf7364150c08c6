"""
Binance.US REST endpoint catalog

Thin per-endpoint functions grouped by API section:
- Wallet (signed account/wallet endpoints)
- Market data (public endpoints, plus one key-only endpoint)
- Spot account (signed order and account endpoints)

Each function takes a request function, builds the params for one endpoint
and returns the executor's Result.
"""
