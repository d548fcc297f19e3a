from django import forms


class EmailSignInForm(forms.Form):
    email = forms.EmailField(
        required=True,
        widget=forms.EmailInput(attrs={
            'placeholder': 'Enter your email address',
            'class': 'form-control'
        })
    )

    def clean_email(self):
        return self.cleaned_data['email'].strip().lower()
