import django_filters
from django.utils import timezone

from booking.models import Booking


class BookingFilter(django_filters.FilterSet):
    """Narrows a customer's booking history by status, stay dates and hotel."""

    status = django_filters.ChoiceFilter(choices=Booking.BookingStatus.choices)
    stays_from = django_filters.DateFilter(field_name="check_in_date", lookup_expr="gte")
    stays_until = django_filters.DateFilter(field_name="check_out_date", lookup_expr="lte")
    upcoming = django_filters.BooleanFilter(method="filter_upcoming")

    class Meta:
        model = Booking
        fields = ["status", "hotel", "room"]

    def filter_upcoming(self, queryset, name, value):
        today = timezone.localdate()
        if value:
            return queryset.filter(check_out_date__gt=today)
        return queryset.filter(check_out_date__lte=today)
