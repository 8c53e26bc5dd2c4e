# api/urls.py

from django.urls import path

from . import views

urlpatterns = [
    # Gas price, latest block and balance for an address
    path("eth/<str:address>", views.account_view, name="account"),

    # ERC-20 name, symbol and total supply
    path("token/<str:address>", views.token_view, name="token"),
]
