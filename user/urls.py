from django.urls import path
from . import views

app_name = 'user'

urlpatterns = [
    path('', views.LandingPage.as_view(), name='landing'),
    path('signin/', views.handle_sign_in, name='sign_in'),
    path('signin/check-email/', views.CheckEmail.as_view(), name='check_email'),
    path('signin/verify/<str:token>/', views.VerifySignIn.as_view(), name='verify_sign_in'),
    path('logout/', views.logout_view, name='logout'),
]
