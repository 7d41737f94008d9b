"""Clothing designs owned by a user; trending fashions refer to them."""
