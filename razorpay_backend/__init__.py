"""
Razorpay payment backend: órdenes, verificación de pagos y webhooks.
"""
