from django.conf import settings
from django.contrib.staticfiles.urls import staticfiles_urlpatterns

urlpatterns = []

if settings.DEBUG:
    urlpatterns += staticfiles_urlpatterns()
