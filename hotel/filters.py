import django_filters
from django.db.models import Exists, OuterRef

from hotel.models import Hotel
from room.models import Room


class HotelFilter(django_filters.FilterSet):
    """
    Hotel search by location, minimum rating and nightly price.
    A price range matches hotels having at least one room inside it.
    """

    city = django_filters.CharFilter(lookup_expr="iexact")
    country = django_filters.CharFilter(lookup_expr="iexact")
    min_rating = django_filters.NumberFilter(field_name="rating", lookup_expr="gte")
    min_price = django_filters.NumberFilter(method="filter_price_range")
    max_price = django_filters.NumberFilter(method="filter_price_range")

    class Meta:
        """Meta configuration for HotelFilter."""

        model = Hotel
        fields = ["city", "country"]

    def filter_price_range(self, queryset, name, value):
        rooms = Room.objects.filter(hotel=OuterRef("pk"))
        min_price = self.form.cleaned_data.get("min_price")
        max_price = self.form.cleaned_data.get("max_price")
        if min_price is not None:
            rooms = rooms.filter(price_per_night__gte=min_price)
        if max_price is not None:
            rooms = rooms.filter(price_per_night__lte=max_price)
        return queryset.filter(Exists(rooms))
