"""Owned state components: session machine, ledger, settings and view stores."""
