from suite_money.domain.monetary.currency import Currency


# Americas
USD = Currency("USD", 2, "US Dollar", "$", 840)
CAD = Currency("CAD", 2, "Canadian Dollar", "CA$", 124)
MXN = Currency("MXN", 2, "Mexican Peso", "MX$", 484)
BRL = Currency("BRL", 2, "Brazilian Real", "R$", 986)

# Europe
EUR = Currency("EUR", 2, "Euro", "€", 978)
GBP = Currency("GBP", 2, "British Pound", "£", 826)
CHF = Currency("CHF", 2, "Swiss Franc", "CHF", 756)
SEK = Currency("SEK", 2, "Swedish Krona", "SEK", 752)
NOK = Currency("NOK", 2, "Norwegian Krone", "NOK", 578)
DKK = Currency("DKK", 2, "Danish Krone", "DKK", 208)
PLN = Currency("PLN", 2, "Polish Zloty", "PLN", 985)
CZK = Currency("CZK", 2, "Czech Koruna", "CZK", 203)
ISK = Currency("ISK", 0, "Icelandic Krona", "ISK", 352)

# Asia / Pacific
JPY = Currency("JPY", 0, "Japanese Yen", "¥", 392)
KRW = Currency("KRW", 0, "South Korean Won", "₩", 410)
CNY = Currency("CNY", 2, "Chinese Yuan", "CN¥", 156)
INR = Currency("INR", 2, "Indian Rupee", "₹", 356)
AUD = Currency("AUD", 2, "Australian Dollar", "A$", 36)
NZD = Currency("NZD", 2, "New Zealand Dollar", "NZ$", 554)
SGD = Currency("SGD", 2, "Singapore Dollar", "SGD", 702)
HKD = Currency("HKD", 2, "Hong Kong Dollar", "HK$", 344)

# Middle East / Africa (three minor-unit digits)
KWD = Currency("KWD", 3, "Kuwaiti Dinar", "KWD", 414)
BHD = Currency("BHD", 3, "Bahraini Dinar", "BHD", 48)
OMR = Currency("OMR", 3, "Omani Rial", "OMR", 512)
JOD = Currency("JOD", 3, "Jordanian Dinar", "JOD", 400)
TND = Currency("TND", 3, "Tunisian Dinar", "TND", 788)
ZAR = Currency("ZAR", 2, "South African Rand", "ZAR", 710)

PREDEFINED_CURRENCIES = (
    USD, CAD, MXN, BRL,
    EUR, GBP, CHF, SEK, NOK, DKK, PLN, CZK, ISK,
    JPY, KRW, CNY, INR, AUD, NZD, SGD, HKD,
    KWD, BHD, OMR, JOD, TND, ZAR,
)

# Register all predefined currencies
for _currency in PREDEFINED_CURRENCIES:
    Currency.register(_currency, overwrite=True)
