# Lets pytest find the hirank package from a plain checkout.
