from django.urls import path

from .views import HomeView, SectionView

app_name = "viewer"

urlpatterns = [
    path("", HomeView.as_view(), name="index"),
    path("<slug:section>/", SectionView.as_view(), name="section"),
]
