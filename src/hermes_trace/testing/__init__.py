"""Testing – fakes and property-based strategies for hermes-trace users."""
