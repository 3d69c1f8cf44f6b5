"""Topic input and title selection steps."""
