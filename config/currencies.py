# Fallback whitelist used until the upstream currency list has been loaded.
DEFAULT_CURRENCIES: tuple[str, ...] = (
	'USD',  # United States Dollar
	'EUR',  # Euro
	'GBP',  # British Pound
	'JPY',  # Japanese Yen
	'CAD',  # Canadian Dollar
	'AUD',  # Australian Dollar
	'CHF',  # Swiss Franc
	'CNY',  # Chinese Yuan
	'HKD',  # Hong Kong Dollar
	'NZD',  # New Zealand Dollar
	'SEK',  # Swedish Krona
	'NOK',  # Norwegian Krone
	'SGD',  # Singapore Dollar
	'KRW',  # South Korean Won
	'INR',  # Indian Rupee
)

DEFAULT_BASE_CURRENCY = 'USD'

DEFAULT_TARGET_CURRENCIES: tuple[str, ...] = ('EUR', 'GBP', 'JPY', 'CAD', 'AUD')
