from decimal import Decimal

# Acima disso o arredondamento em centavos estoura a precisao do Decimal.
VALOR_MAXIMO = Decimal("999999999999.99")
HORAS_MAXIMAS = Decimal("100000")
