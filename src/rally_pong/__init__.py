"""
Rally Pong: a human paddle against a predictive CPU paddle.
"""
