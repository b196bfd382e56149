from py_steam_guard.guard import generate_auth_code, generate_auth_code_for_time
from py_steam_guard.utils import current_time
