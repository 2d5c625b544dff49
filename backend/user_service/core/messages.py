"""
User-facing messages returned in response bodies.
"""

NAME_REQUIRED = "O nome é obrigatório."
EMAIL_INVALID = "O e-mail é inválido."
PASSWORD_TOO_SHORT = "A senha deve ter no mínimo 6 caracteres."

EMAIL_IN_USE = "Este e-mail já está em uso."
INVALID_CREDENTIALS = "Credenciais inválidas."

USER_REGISTERED = "Usuário cadastrado com sucesso."
USER_AUTHENTICATED = "Usuário autenticado com sucesso."
