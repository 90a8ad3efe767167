# menu/forms.py


def form_data_from_post(post):
    """Category form values; an unchecked isActive box is simply absent"""
    return {
        'name': post.get('name', '').strip(),
        'description': post.get('description', '').strip(),
        'isActive': 'isActive' in post,
    }
