# restaurants/forms.py
"""HTML form fields for restaurants; values go through RestaurantSerializer"""

FORM_FIELDS = (
    'name', 'cuisine', 'ownerName', 'phone', 'email', 'address',
    'city', 'state', 'status', 'commissionRate', 'revenue', 'imageUrl',
)

# Left out when blank so the serializer defaults apply
OPTIONAL_FIELDS = ('status', 'commissionRate', 'revenue')


def form_data_from_post(post):
    data = {}
    for name in FORM_FIELDS:
        if name not in post:
            continue
        value = post.get(name, '').strip()
        if name in OPTIONAL_FIELDS and not value:
            continue
        data[name] = value
    return data
