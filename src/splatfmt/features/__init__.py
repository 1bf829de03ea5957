"""Feature packages for splatfmt."""
