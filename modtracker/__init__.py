"""A Discord bot for tracking infractions and promotions."""
