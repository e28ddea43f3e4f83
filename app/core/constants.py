# Key the cart is stored under (shared by every CartStore backend)
CART_STORAGE_KEY = "octocat-cart"

# Orders at or above this subtotal ship for free
FREE_SHIPPING_THRESHOLD = 100.0
SHIPPING_FEE = 25.0
