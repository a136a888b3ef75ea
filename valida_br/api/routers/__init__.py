# valida_br/api/routers/__init__.py
# Cada módulo deste pacote expõe um `router` (APIRouter) incluído em api_main.py.
