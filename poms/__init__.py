"""POMS: purchase-order management with role-based access control."""
