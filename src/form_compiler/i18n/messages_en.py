# All UI strings for English locale
MESSAGES = {
    # App
    "app.title": "Sign-up Form",
    "app.subtitle": "Automatic form generation with conditional fields",
    "app.language": "Language",
    # Form
    "form.submit": "Submit Form",
    "form.reset": "Reset",
    "form.submitted": "Form submitted",
    "form.select.placeholder": "Select {fieldName}",
    # Field labels
    "field.name": "Name",
    "field.email": "Email",
    "field.password": "Password",
    "field.repeatPassword": "Repeat Password",
    "field.country": "Country",
    "field.gender": "Gender",
    "field.notifications": "Notifications",
    "field.newsletter": "Newsletter",
    "field.phoneNumber": "Phone Number",
    "field.address": "Address",
    "field.terms": "Terms and Conditions",
    # Field descriptions
    "field.notifications.description": "Receive notifications by email",
    "field.newsletter.description": "Subscribe to our newsletter",
    "field.terms.description": "I accept the terms and conditions",
    # Field placeholders
    "field.name.placeholder": "Enter your full name",
    "field.email.placeholder": "Enter your email address",
    "field.password.placeholder": "Enter your password",
    "field.repeatPassword.placeholder": "Confirm your password",
    "field.phoneNumber.placeholder": "Enter your phone number",
    "field.address.placeholder": "Enter your address",
    # Country options
    "country.us": "United States",
    "country.ca": "Canada",
    "country.uk": "United Kingdom",
    "country.fr": "France",
    "country.de": "Germany",
    # Gender options
    "gender.male": "Male",
    "gender.female": "Female",
    "gender.other": "Other",
    "gender.prefer-not-to-say": "Prefer not to say",
    # Generic errors
    "error.required": "This field is required",
    "error.invalid": "Invalid value",
    "error.string.min": "Must be at least {min} characters",
    "error.string.max": "Must be at most {max} characters",
    "error.string.length": "Must be exactly {length} characters",
    "error.number.invalid": "Must be a number",
    "error.number.integer": "Must be a whole number",
    "error.number.min": "Must be at least {min}",
    "error.number.max": "Must be at most {max}",
    # Field errors
    "error.name.min": "Name must be at least 2 characters",
    "error.email.invalid": "Please enter a valid email",
    "error.password.min": "Password must be at least 6 characters",
    "error.password.match": "Passwords don't match",
    "error.password.length": "Password must be at least 6 characters",
    "error.terms.required": "You must accept the terms",
    "error.phoneNumber.required": "Phone number for US residents",
    "error.phoneNumber.length": "Phone number must be exactly 10 digits",
}
